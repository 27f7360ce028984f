"""History screen: workouts newest-first, with removal."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import tzinfo
from uuid import UUID

from fittrack.persistence.store import TrackerStore
from fittrack.tracking.models import WorkoutEntry
from fittrack.utils.day_key import to_local

EMPTY_TITLE = "No workouts yet"
EMPTY_MESSAGE = "Log your first workout in the Log tab."
NOTES_MAX_LINES = 2


@dataclass(frozen=True)
class HistoryRow:
    position: int
    workout_id: UUID
    activity_type: str
    when: str
    duration: str | None
    notes: str | None


@dataclass(frozen=True)
class HistoryView:
    rows: list[HistoryRow] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def empty_title(self) -> str:
        return EMPTY_TITLE

    @property
    def empty_message(self) -> str:
        return EMPTY_MESSAGE


def format_when(entry: WorkoutEntry, tz: tzinfo | None = None) -> str:
    """Abbreviated date and short time, e.g. "Jun 10, 2024 at 7:05 AM"."""
    local = to_local(entry.timestamp, tz)
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{local:%b} {local.day}, {local.year} at {hour}:{local.minute:02d} {meridiem}"


def clip_notes(notes: str | None, max_lines: int = NOTES_MAX_LINES) -> str | None:
    if not notes or not notes.strip():
        return None
    lines = notes.splitlines()
    clipped = "\n".join(lines[:max_lines])
    return clipped + " …" if len(lines) > max_lines else clipped


class HistoryScreen:
    def __init__(self, store: TrackerStore) -> None:
        self.store = store

    def view(self) -> HistoryView:
        rows = [
            HistoryRow(
                position=i,
                workout_id=entry.id,
                activity_type=entry.activity_type,
                when=format_when(entry, self.store.tz),
                duration=f"{entry.duration_minutes} min" if entry.duration_minutes is not None else None,
                notes=clip_notes(entry.notes),
            )
            for i, entry in enumerate(self.store.workouts)
        ]
        return HistoryView(rows=rows)

    def remove(self, positions: Iterable[int]) -> None:
        """Delete the workouts shown at the given (0-based) positions."""
        self.store.delete_workouts(positions)
