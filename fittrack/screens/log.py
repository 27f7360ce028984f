"""Quick Log screen: a small form that saves one workout."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from fittrack.persistence.store import TrackerStore
from fittrack.tracking.models import ACTIVITY_TYPES, WorkoutEntry

DEFAULT_ACTIVITY_TYPE = "Workout"
DEFAULT_DURATION_MINUTES = 30
MIN_DURATION_MINUTES = 5
MAX_DURATION_MINUTES = 240
DURATION_STEP_MINUTES = 5


def clamp_duration(minutes: int) -> int:
    """Snap minutes to the 5-minute grid and keep it within 5..240."""
    steps = round((minutes - MIN_DURATION_MINUTES) / DURATION_STEP_MINUTES)
    snapped = MIN_DURATION_MINUTES + steps * DURATION_STEP_MINUTES
    return max(MIN_DURATION_MINUTES, min(MAX_DURATION_MINUTES, snapped))


@dataclass
class LogForm:
    """Transient form input."""

    activity_type: str = DEFAULT_ACTIVITY_TYPE
    duration_minutes: int = DEFAULT_DURATION_MINUTES
    notes: str = ""


class LogScreen:
    suggestions: tuple[str, ...] = ACTIVITY_TYPES

    def __init__(self, store: TrackerStore) -> None:
        self.store = store
        self.form = LogForm()

    def set_activity_type(self, activity_type: str) -> None:
        self.form.activity_type = activity_type.strip() or DEFAULT_ACTIVITY_TYPE

    def set_duration(self, minutes: int) -> None:
        self.form.duration_minutes = clamp_duration(minutes)

    def increment(self) -> None:
        self.set_duration(self.form.duration_minutes + DURATION_STEP_MINUTES)

    def decrement(self) -> None:
        self.set_duration(self.form.duration_minutes - DURATION_STEP_MINUTES)

    def set_notes(self, notes: str) -> None:
        self.form.notes = notes

    def reset(self) -> None:
        self.form = LogForm()

    def submit(self, now: datetime | None = None) -> WorkoutEntry:
        """Save the form as a new workout and reset the form.

        Args:
            now: Timestamp for the entry. Defaults to the current local time.

        Returns:
            The workout that was added to the store
        """
        notes = self.form.notes.strip()
        entry = WorkoutEntry(
            timestamp=now or datetime.now().astimezone(),
            activity_type=self.form.activity_type,
            notes=notes or None,
            duration_minutes=self.form.duration_minutes,
        )
        self.store.add_workout(entry)
        self.reset()
        return entry
