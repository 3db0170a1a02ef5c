"""Structural equality used to detect status changes."""

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


def semantic_deep_equal(a: Any, b: Any) -> bool:
    """Compare two values field by field.

    Pydantic models are compared per declared field, sequences in order and
    mappings by key. Timestamps compare as instants, an unset timestamp
    equals the zero time, and None equals an empty collection, the same way
    Kubernetes compares API objects.
    """
    if a is b:
        return True
    if _is_empty(a) and _is_empty(b):
        return True
    if a is None and isinstance(b, datetime):
        a = ZERO_TIME
    if b is None and isinstance(a, datetime):
        b = ZERO_TIME

    if isinstance(a, BaseModel) or isinstance(b, BaseModel):
        if type(a) is not type(b):
            return False
        return all(
            semantic_deep_equal(getattr(a, field), getattr(b, field))
            for field in type(a).model_fields
        )

    if isinstance(a, datetime) and isinstance(b, datetime):
        return _as_utc(a) == _as_utc(b)

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if a.keys() != b.keys():
            return False
        return all(semantic_deep_equal(a[k], b[k]) for k in a)

    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if len(a) != len(b):
            return False
        return all(semantic_deep_equal(x, y) for x, y in zip(a, b))

    return a == b


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, (list, tuple, Mapping)) and len(value) == 0


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
