"""Stats screen: workouts in the trailing seven days against the weekly goal."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from fittrack.persistence.store import TrackerStore
from fittrack.tracking.stats import WEEK_WINDOW_DAYS, weekly_count

DEFAULT_WEEKLY_GOAL = 4


@dataclass(frozen=True)
class StatsView:
    count: int
    goal: int

    @property
    def title(self) -> str:
        return f"Last {WEEK_WINDOW_DAYS} Days"

    @property
    def count_label(self) -> str:
        return f"{self.count} workout" if self.count == 1 else f"{self.count} workouts"

    @property
    def goal_label(self) -> str:
        return f"Goal: {self.goal}+ per week"

    @property
    def goal_met(self) -> bool:
        return self.count >= self.goal


class StatsScreen:
    def __init__(self, store: TrackerStore, weekly_goal: int = DEFAULT_WEEKLY_GOAL) -> None:
        self.store = store
        self.weekly_goal = weekly_goal

    def view(self, now: datetime | None = None) -> StatsView:
        count = weekly_count(self.store.workouts, now or datetime.now().astimezone(), tz=self.store.tz)
        return StatsView(count=count, goal=self.weekly_goal)
