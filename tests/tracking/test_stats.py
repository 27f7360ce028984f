"""Tests for the rolling weekly count and habit streaks."""

from datetime import date, datetime, timedelta, timezone

from fittrack.tracking.models import HabitEntry, WorkoutEntry
from fittrack.tracking.stats import current_streak, weekly_count, window_start

NOW = datetime(2024, 6, 10, 12, 0, tzinfo=timezone.utc)


def _workout_at(moment: datetime) -> WorkoutEntry:
    return WorkoutEntry(activity_type="Run", timestamp=moment, duration_minutes=30)


def test_weekly_count_counts_trailing_seven_days() -> None:
    workouts = [
        _workout_at(datetime(2024, 6, 9, 8, 0, tzinfo=timezone.utc)),
        _workout_at(datetime(2024, 6, 5, 8, 0, tzinfo=timezone.utc)),
        _workout_at(datetime(2024, 6, 2, 8, 0, tzinfo=timezone.utc)),
    ]
    assert weekly_count(workouts, NOW, tz=timezone.utc) == 2


def test_weekly_count_lower_bound_is_inclusive() -> None:
    start = window_start(NOW, tz=timezone.utc)
    assert start == datetime(2024, 6, 3, 12, 0, tzinfo=timezone.utc)
    assert weekly_count([_workout_at(start)], NOW, tz=timezone.utc) == 1
    assert weekly_count([_workout_at(start - timedelta(seconds=1))], NOW, tz=timezone.utc) == 0


def test_weekly_count_empty() -> None:
    assert weekly_count([], NOW) == 0


def test_weekly_count_compares_across_zones() -> None:
    # 2024-06-03 11:30 UTC expressed in a +02:00 offset
    just_outside = datetime(2024, 6, 3, 13, 30, tzinfo=timezone(timedelta(hours=2)))
    assert weekly_count([_workout_at(just_outside)], NOW, tz=timezone.utc) == 0


def test_current_streak_counts_consecutive_days_ending_today() -> None:
    habit = HabitEntry(name="Water", completed_days={"2024-06-10", "2024-06-09", "2024-06-08", "2024-06-06"})
    assert current_streak(habit, date(2024, 6, 10)) == 3


def test_current_streak_survives_unmarked_today() -> None:
    habit = HabitEntry(name="Water", completed_days={"2024-06-09", "2024-06-08"})
    assert current_streak(habit, date(2024, 6, 10)) == 2


def test_current_streak_zero_when_yesterday_missed() -> None:
    habit = HabitEntry(name="Water", completed_days={"2024-06-08"})
    assert current_streak(habit, date(2024, 6, 10)) == 0
