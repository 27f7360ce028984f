"""Error types for the persistence layer.

Neither error ever reaches the user: the store catches both, logs them and
carries on with its in-memory state.
"""

from pathlib import Path


class StorageError(RuntimeError):
    """Base class for storage failures."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class LoadParseError(StorageError):
    """Raised when a collection file exists but cannot be read or decoded.

    The store substitutes the default collection for the affected file.
    """


class FlushError(StorageError):
    """Raised when writing a collection file fails.

    The in-memory collection stays authoritative; the file keeps its last
    successfully written snapshot.
    """
