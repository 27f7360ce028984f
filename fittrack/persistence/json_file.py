"""JSON file codec for one record collection.

Each collection lives in its own file as a JSON array of records using the
field aliases declared on the models.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from fittrack.persistence.errors import FlushError, LoadParseError

T = TypeVar("T", bound=BaseModel)


def encode_collection(items: Sequence[T], model: type[T]) -> bytes:
    adapter = TypeAdapter(list[model])
    return adapter.dump_json(list(items), by_alias=True, exclude_none=True, indent=2)


def decode_collection(raw: bytes | str, model: type[T]) -> list[T]:
    """Decode a JSON array of records.

    Raises:
        ValidationError: If raw is not valid JSON or a record is malformed
    """
    adapter = TypeAdapter(list[model])
    return adapter.validate_json(raw)


def read_collection(path: Path, model: type[T]) -> list[T]:
    """Read and decode a collection file.

    Args:
        path: Collection file
        model: Record model of the collection

    Returns:
        Decoded records in file order

    Raises:
        FileNotFoundError: If the file does not exist
        LoadParseError: If the file cannot be read or decoded
    """
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        raise
    except OSError as e:
        raise LoadParseError(path, f"unreadable: {e}") from e

    try:
        return decode_collection(raw, model)
    except ValidationError as e:
        raise LoadParseError(path, f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}") from e


def write_collection(path: Path, items: Sequence[T], model: type[T]) -> None:
    """Encode items and overwrite the collection file.

    Raises:
        FlushError: If items cannot be encoded or the file cannot be written
    """
    try:
        payload = encode_collection(items, model)
    except PydanticSerializationError as e:
        raise FlushError(path, f"cannot encode: {e}") from e

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
    except OSError as e:
        raise FlushError(path, str(e)) from e
