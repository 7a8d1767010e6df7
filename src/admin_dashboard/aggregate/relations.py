"""Explicit field and relation access for entity records.

Records reach the aggregation layer either as Pydantic entity models or as
raw JSON mappings. These accessors read both shapes and substitute a fixed
sentinel label whenever a relation is absent.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

UNASSIGNED = "Unassigned"
UNKNOWN = "unknown"


def field_value(entity: Any, *names: str) -> Any:
    """Return the first non-None field among `names`, or None.

    Works for mappings (key lookup) and objects (attribute lookup).
    """
    if entity is None:
        return None
    for name in names:
        if isinstance(entity, Mapping):
            value = entity.get(name)
        else:
            value = getattr(entity, name, None)
        if value is not None:
            return value
    return None


def resolve_relation(entity: Any, path: str, sentinel: str = UNASSIGNED) -> str:
    """Resolve a dotted relation path to a label.

    Args:
        entity: Record to read from.
        path: Dotted path such as `"department.name"`.
        sentinel: Label returned when any step of the path is missing.

    Returns:
        The resolved value as a string, or `sentinel`.
    """
    current = entity
    for name in path.split("."):
        current = field_value(current, name)
        if current is None:
            return sentinel
    return current if isinstance(current, str) else str(current)


def created_at_of(record: Any) -> Any:
    """Return the raw creation timestamp of a record (either spelling)."""
    return field_value(record, "created_at", "createdAt")


def role_of(user: Any) -> str:
    return resolve_relation(user, "role", UNKNOWN)


def role_is(role: str) -> Callable[[Any], bool]:
    """Build a predicate matching users whose role equals `role`."""

    def _matches(user: Any) -> bool:
        return role_of(user) == role

    return _matches
