"""Tests for the Habits screen."""

from datetime import datetime, timedelta, timezone

from fittrack.persistence.store import TrackerStore
from fittrack.screens.habits import HabitsScreen

NOW = datetime(2024, 6, 10, 8, 0, tzinfo=timezone.utc)


def test_rows_reflect_today(store: TrackerStore) -> None:
    screen = HabitsScreen(store)
    view = screen.view(now=NOW)

    assert view.today == "2024-06-10"
    assert [r.name for r in view.rows] == ["Water", "Meditation", "Steps"]
    assert not any(r.done for r in view.rows)
    assert {r.action_label for r in view.rows} == {"Mark"}


def test_toggle_marks_today_and_back(store: TrackerStore) -> None:
    screen = HabitsScreen(store)
    water = screen.view(now=NOW).rows[0]

    screen.toggle(water.habit_id, now=NOW)
    row = screen.view(now=NOW).rows[0]
    assert row.done
    assert row.action_label == "Done"
    assert row.streak == 1

    screen.toggle(water.habit_id, now=NOW)
    assert not screen.view(now=NOW).rows[0].done


def test_mark_from_yesterday_is_not_done_today(store: TrackerStore) -> None:
    screen = HabitsScreen(store)
    steps = screen.view(now=NOW).rows[2]
    screen.toggle(steps.habit_id, now=NOW - timedelta(days=1))

    row = screen.view(now=NOW).rows[2]
    assert not row.done
    assert row.streak == 1


def test_toggle_without_now_uses_today(store: TrackerStore) -> None:
    screen = HabitsScreen(store)
    habit_id = screen.view().rows[1].habit_id
    screen.toggle(habit_id)
    assert screen.view().rows[1].done
