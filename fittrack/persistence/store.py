"""Persistent store for workouts and habits.

TrackerStore is the single owner of both collections. Screens read snapshots
from it and send every change through its mutation methods. Each mutation is
applied in memory first and then flushed to that collection's JSON file.

Persistence is best-effort:
- A missing or unparseable file at load time yields the default collection
- A failed flush is logged and counted, never raised; memory stays authoritative
"""

from __future__ import annotations

import asyncio
import threading
from collections.abc import Iterable
from datetime import datetime, tzinfo
from pathlib import Path
from uuid import UUID

from loguru import logger

from fittrack.config.settings import Settings
from fittrack.persistence.errors import FlushError, LoadParseError
from fittrack.persistence.json_file import read_collection, write_collection
from fittrack.tracking.models import HabitEntry, WorkoutEntry, default_habits
from fittrack.utils.day_key import day_key


class TrackerStore:
    """Owns the workout and habit collections and their storage files."""

    def __init__(self, workouts_path: Path, habits_path: Path, tz: tzinfo | None = None) -> None:
        self.workouts_path = workouts_path
        self.habits_path = habits_path
        self.tz = tz
        self._workouts: list[WorkoutEntry] = []
        self._habits: list[HabitEntry] = default_habits()
        self._loaded = False
        self._lock = threading.RLock()
        self.flush_failures = 0

    @classmethod
    def from_settings(cls, settings: Settings) -> TrackerStore:
        return cls(settings.workouts_path, settings.habits_path, tz=settings.local_tz())

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def workouts(self) -> list[WorkoutEntry]:
        """Workouts, newest first."""
        with self._lock:
            return list(self._workouts)

    @property
    def habits(self) -> list[HabitEntry]:
        with self._lock:
            return list(self._habits)

    def get_habit(self, habit_id: UUID) -> HabitEntry | None:
        with self._lock:
            return next((habit for habit in self._habits if habit.id == habit_id), None)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Load both collections, falling back to defaults for absent or corrupt files."""
        workouts = _load_or_default(self.workouts_path, WorkoutEntry, list)
        habits = _load_or_default(self.habits_path, HabitEntry, default_habits)
        self._install(workouts, habits)

    async def load_all(self) -> None:
        """Load both collections off the event loop.

        Same semantics as load(); file reads run in a worker thread.
        """
        workouts = await asyncio.to_thread(_load_or_default, self.workouts_path, WorkoutEntry, list)
        habits = await asyncio.to_thread(_load_or_default, self.habits_path, HabitEntry, default_habits)
        self._install(workouts, habits)

    def _install(self, workouts: list[WorkoutEntry], habits: list[HabitEntry]) -> None:
        with self._lock:
            self._workouts = workouts
            self._habits = habits
            self._loaded = True
        logger.debug(f"Store loaded: {len(workouts)} workout(s), {len(habits)} habit(s)")

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_workout(self, entry: WorkoutEntry) -> None:
        """Insert a workout at the front of the list and flush workouts."""
        with self._lock:
            self._workouts.insert(0, entry)
            logger.debug(f"Added workout {entry.id} ({entry.activity_type})")
            self._flush_workouts()

    def delete_workouts(self, indices: Iterable[int]) -> None:
        """Remove the workouts at the given positions and flush workouts.

        Raises:
            IndexError: If any position is outside the current list. Nothing
                is removed in that case.
        """
        with self._lock:
            positions = set(indices)
            out_of_range = sorted(i for i in positions if not 0 <= i < len(self._workouts))
            if out_of_range:
                raise IndexError(f"Workout position(s) out of range: {out_of_range} (have {len(self._workouts)})")
            self._workouts = [w for i, w in enumerate(self._workouts) if i not in positions]
            logger.debug(f"Deleted {len(positions)} workout(s)")
            self._flush_workouts()

    def toggle_habit(self, habit_id: UUID, on: datetime) -> None:
        """Mark or unmark a habit for the local day of `on`.

        Unknown habit ids are ignored.
        """
        with self._lock:
            index = next((i for i, habit in enumerate(self._habits) if habit.id == habit_id), None)
            if index is None:
                logger.debug(f"toggle_habit: no habit with id {habit_id}, ignoring")
                return
            key = day_key(on, self.tz)
            self._habits[index] = self._habits[index].toggled(key)
            logger.debug(f"Toggled habit '{self._habits[index].name}' for {key}")
            self._flush_habits()

    # ------------------------------------------------------------------
    # Flushing
    # ------------------------------------------------------------------

    def _flush_workouts(self) -> None:
        self._flush(self.workouts_path, self._workouts, WorkoutEntry)

    def _flush_habits(self) -> None:
        self._flush(self.habits_path, self._habits, HabitEntry)

    def _flush(self, path: Path, items: list, model: type) -> None:
        try:
            write_collection(path, items, model)
        except FlushError as e:
            self.flush_failures += 1
            logger.opt(exception=e).error(f"Failed to save {path.name}: {e.reason}")


def _load_or_default(path: Path, model: type, default) -> list:
    try:
        items = read_collection(path, model)
    except FileNotFoundError:
        logger.debug(f"{path} not found, using defaults")
        return default()
    except LoadParseError as e:
        logger.warning(f"Could not parse {path.name}, using defaults: {e.reason}")
        return default()
    logger.debug(f"Loaded {len(items)} record(s) from {path}")
    return items
