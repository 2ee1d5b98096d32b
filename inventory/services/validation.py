"""Validation primitives shared by every store operation.

Each check returns the validated value or raises ``error`` (``ValidationError``
unless the caller picks another class), with ``label`` prefixed to the message.
"""

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any

from inventory.exceptions import InvalidArgumentError, StoreError, ValidationError


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid id or count
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_id(value: Any) -> bool:
    """Check whether value is an integer >= 0."""
    return _is_int(value) and value >= 0


def check_id(
    value: Any, label: str = "id", error: type[StoreError] = InvalidArgumentError
) -> int:
    """Require an integer >= 0."""
    if not _is_int(value):
        raise error(f"{label}: not an integer")
    if value < 0:
        raise error(f"{label}: was < 0")
    return value


def check_count(
    value: Any, label: str = "count", error: type[StoreError] = ValidationError
) -> int:
    """Require an integer >= 1."""
    if not _is_int(value):
        raise error(f"{label}: not an integer")
    if value < 1:
        raise error(f"{label}: was < 1")
    return value


def check_non_empty_string(
    value: Any, label: str = "name", error: type[StoreError] = ValidationError
) -> str:
    """Require a non-empty string."""
    if value is None:
        raise error(f"{label}: is missing")
    if not isinstance(value, str):
        raise error(f"{label}: not a string")
    if value == "":
        raise error(f"{label}: was empty")
    return value


def check_timestamps(
    created_at: Any,
    modified_at: Any,
    label: str,
    error: type[StoreError] = ValidationError,
) -> None:
    """Require two timezone-aware datetimes with created_at <= modified_at."""
    for name, value in (("created_at", created_at), ("modified_at", modified_at)):
        if not isinstance(value, datetime) or value.tzinfo is None:
            raise error(f"{label}: {name} not a timezone-aware datetime")
    if created_at > modified_at:
        raise error(f"{label}: created_at is later than modified_at")


def check_sequence(
    value: Any, label: str, error: type[StoreError] = ValidationError
) -> list[Any]:
    """Require a list or tuple (strings are rejected)."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise error(f"{label}: not a list")
    return list(value)


def check_mapping(
    value: Any, label: str = "payload", error: type[StoreError] = InvalidArgumentError
) -> dict[str, Any]:
    """Require a mapping and return a plain dict copy of it."""
    if not isinstance(value, Mapping):
        raise error(f"{label}: not an object")
    return dict(value)
