"""Loaders for assignment and class records exported as JSON."""

import json
from dataclasses import fields
from typing import Any, TypeVar

from .models import Assignment, ClassInfo


T = TypeVar("T")


def _read_records(path: str) -> list[dict[str, Any]]:
    with open(path, encoding="utf-8") as f:
        payload = json.load(f)

    # LMS API responses wrap the list under "data"
    if isinstance(payload, dict):
        payload = payload.get("data")

    if not isinstance(payload, list):
        raise ValueError(f"{path}: expected a JSON array of records")
    return payload


def _build(cls: type[T], record: dict[str, Any]) -> T:
    """Create a dataclass instance from a record, ignoring unknown keys."""
    if not isinstance(record, dict):
        raise ValueError(f"Expected a JSON object, got {type(record).__name__}")

    known = {f.name for f in fields(cls)}
    values = {key: value for key, value in record.items() if key in known}

    # Ids are compared by equality, keep them as strings on both sides
    for key in ("id", "class_id"):
        if values.get(key) is not None:
            values[key] = str(values[key])

    try:
        return cls(**values)
    except TypeError as e:
        raise ValueError(f"Invalid {cls.__name__} record {record!r}: {e}")


def load_assignments(path: str) -> list[Assignment]:
    """Load assignment records from a JSON file.

    Args:
        path: Path to a JSON array (or an object with a "data" array).

    Returns:
        List of assignments in file order.

    Raises:
        ValueError: If the file does not hold valid assignment records.
    """
    return [_build(Assignment, record) for record in _read_records(path)]


def load_classes(path: str) -> list[ClassInfo]:
    """Load class records from a JSON file."""
    return [_build(ClassInfo, record) for record in _read_records(path)]
