"""Derived statistics over workouts and habits.

Nothing here is stored; every value is recomputed from the current lists.
"""

from collections.abc import Iterable
from datetime import date, datetime, timedelta, tzinfo

from fittrack.tracking.models import HabitEntry, WorkoutEntry
from fittrack.utils.day_key import day_key, to_local

WEEK_WINDOW_DAYS = 7


def window_start(now: datetime, days: int = WEEK_WINDOW_DAYS, tz: tzinfo | None = None) -> datetime:
    """Return the inclusive lower bound of the trailing window ending at now."""
    return to_local(now, tz) - timedelta(days=days)


def weekly_count(
    workouts: Iterable[WorkoutEntry],
    now: datetime,
    days: int = WEEK_WINDOW_DAYS,
    tz: tzinfo | None = None,
) -> int:
    """Count workouts with timestamp >= now - days."""
    start = window_start(now, days, tz)
    return sum(1 for workout in workouts if to_local(workout.timestamp, tz) >= start)


def current_streak(habit: HabitEntry, today: date) -> int:
    """Number of consecutive completed days ending today.

    An unmarked today does not break the streak yet; counting then starts
    from yesterday.
    """
    day = today
    if day_key(day) not in habit.completed_days:
        day -= timedelta(days=1)
    streak = 0
    while day_key(day) in habit.completed_days:
        streak += 1
        day -= timedelta(days=1)
    return streak
