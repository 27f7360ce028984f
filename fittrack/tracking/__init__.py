"""Workout and habit records plus the statistics derived from them."""

from fittrack.tracking.models import (
    ACTIVITY_TYPES,
    DEFAULT_HABIT_NAMES,
    HabitEntry,
    WorkoutEntry,
    default_habits,
)
from fittrack.tracking.stats import current_streak, weekly_count

__all__ = [
    "ACTIVITY_TYPES",
    "DEFAULT_HABIT_NAMES",
    "HabitEntry",
    "WorkoutEntry",
    "current_streak",
    "default_habits",
    "weekly_count",
]
