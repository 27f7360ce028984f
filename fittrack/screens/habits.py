"""Habits screen: today's check-ins."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from fittrack.persistence.store import TrackerStore
from fittrack.tracking.stats import current_streak
from fittrack.utils.day_key import day_key, parse_day_key


@dataclass(frozen=True)
class HabitRow:
    habit_id: UUID
    name: str
    done: bool
    streak: int

    @property
    def action_label(self) -> str:
        return "Done" if self.done else "Mark"


@dataclass(frozen=True)
class HabitsView:
    today: str
    rows: list[HabitRow]


class HabitsScreen:
    def __init__(self, store: TrackerStore) -> None:
        self.store = store

    def _now(self, now: datetime | None) -> datetime:
        return now or datetime.now().astimezone()

    def view(self, now: datetime | None = None) -> HabitsView:
        today = day_key(self._now(now), self.store.tz)
        today_date = parse_day_key(today)
        rows = [
            HabitRow(
                habit_id=habit.id,
                name=habit.name,
                done=habit.is_done_on(today),
                streak=current_streak(habit, today_date),
            )
            for habit in self.store.habits
        ]
        return HabitsView(today=today, rows=rows)

    def toggle(self, habit_id: UUID, now: datetime | None = None) -> None:
        self.store.toggle_habit(habit_id, self._now(now))
