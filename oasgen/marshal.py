"""Helpers for turning OpenAPI objects into JSON-compatible structures."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from typing import Any


class Omit(enum.Enum):
    """When a field is left out of the marshalled output."""

    NEVER = "never"
    """The field is always written."""

    EMPTY = "empty"
    """The field is skipped when its value is empty (see ``is_empty_value``)."""

    NIL = "nil"
    """The field is skipped only when its value is ``None``."""


def is_empty_value(value: Any) -> bool:
    """Return True if ``value`` counts as empty for an ``Omit.EMPTY`` field.

    ``None``, empty strings and containers, ``False`` and numeric zero are
    empty. Any other object, including one with no contents of its own, is
    not.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def is_nil_value(value: Any) -> bool:
    """Return True if ``value`` is unset (``None``)."""
    return value is None


def to_jsonable(value: Any) -> Any:
    """Recursively convert ``value`` into plain JSON-compatible data.

    Objects providing a ``to_json()`` method are converted through it;
    mappings and sequences are converted item by item.
    """
    to_json = getattr(value, "to_json", None)
    if callable(to_json):
        return to_jsonable(to_json())
    if isinstance(value, Mapping):
        return {key: to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value


def marshal_fields(
    fields: Iterable[tuple[str, Any, Omit]],
    extensions: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a JSON object from ``(name, value, omit)`` triples.

    Fields are skipped according to their ``Omit`` rule. Extensions are
    written inline as siblings of the fields and win on name clashes.
    """
    result: dict[str, Any] = {}
    for name, value, omit in fields:
        if omit is Omit.NIL and is_nil_value(value):
            continue
        if omit is Omit.EMPTY and is_empty_value(value):
            continue
        result[name] = to_jsonable(value)

    for key, value in (extensions or {}).items():
        result[key] = to_jsonable(value)

    return result