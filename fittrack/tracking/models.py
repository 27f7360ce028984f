"""Record types for logged workouts and tracked habits.

Field aliases are the on-disk names: a workout is stored as
{id, date, type, notes?, durationMinutes?} and a habit as {id, name, dates}.
Optional fields hold None in memory and are left out of the file.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_serializer

ACTIVITY_TYPES: tuple[str, ...] = ("Workout", "Run", "Walk", "Yoga", "Cycling")
DEFAULT_HABIT_NAMES: tuple[str, ...] = ("Water", "Meditation", "Steps")


def _now_local() -> datetime:
    return datetime.now().astimezone()


class WorkoutEntry(BaseModel):
    """A single logged workout."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: UUID = Field(default_factory=uuid4)
    timestamp: datetime = Field(default_factory=_now_local, alias="date")
    activity_type: str = Field(..., alias="type", description="Short label, e.g. Run or Yoga")
    notes: str | None = None
    duration_minutes: int | None = Field(default=None, alias="durationMinutes", description="Bounded by the Log screen, not here")


class HabitEntry(BaseModel):
    """A named daily habit and the days it was completed."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: UUID = Field(default_factory=uuid4)
    name: str
    completed_days: frozenset[str] = Field(default_factory=frozenset, alias="dates")

    @field_serializer("completed_days")
    def serialize_completed_days(self, days: frozenset[str]) -> list[str]:
        return sorted(days)

    def is_done_on(self, key: str) -> bool:
        return key in self.completed_days

    def toggled(self, key: str) -> HabitEntry:
        """Return a copy with key marked if it was unmarked, unmarked otherwise."""
        days = self.completed_days - {key} if key in self.completed_days else self.completed_days | {key}
        return self.model_copy(update={"completed_days": frozenset(days)})


def default_habits() -> list[HabitEntry]:
    """Habits seeded on first run."""
    return [HabitEntry(name=name) for name in DEFAULT_HABIT_NAMES]
