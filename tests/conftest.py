"""Root conftest for all tests.

Shared fixtures: a store on a temporary data directory and a loguru sink
that records messages for assertions.
"""

import sys
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest
from loguru import logger

from fittrack.persistence.store import TrackerStore

UTC_ZONE = ZoneInfo("UTC")


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added during a test (the CLI binds one to the runner's stderr)."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


@pytest.fixture
def log_messages() -> list[str]:
    """Collect "LEVEL message" lines emitted through loguru during the test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(f"{m.record['level'].name} {m.record['message']}"), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def workouts_path(tmp_path: Path) -> Path:
    return tmp_path / "workouts.json"


@pytest.fixture
def habits_path(tmp_path: Path) -> Path:
    return tmp_path / "habits.json"


@pytest.fixture
def store(workouts_path: Path, habits_path: Path) -> TrackerStore:
    """Loaded store with no prior files, using UTC day keys."""
    tracker = TrackerStore(workouts_path, habits_path, tz=UTC_ZONE)
    tracker.load()
    return tracker


@pytest.fixture
def fittrack_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point FitTrack settings at tmp_path and pin day keys to UTC."""
    monkeypatch.setenv("FITTRACK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("FITTRACK_TIMEZONE", "UTC")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("FITTRACK_LOG_FILE", raising=False)
    for name in ("FITTRACK_LOG_ROTATION", "FITTRACK_LOG_RETENTION", "FITTRACK_LOG_COMPRESSION"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("FITTRACK_WEEKLY_GOAL", raising=False)
    return tmp_path
