"""Field maps and reserved output keys.

A field map attached to an entry is never mutated once another entry can
observe it: every "add field" operation goes through :func:`merge_fields`,
which returns a fresh dict. Collisions with reserved output keys are resolved
by formatters on their own copy, not at merge time.
"""

from __future__ import annotations

import types
from collections.abc import Mapping
from typing import Any

Fields = dict[str, Any]

FIELD_KEY_MSG = "msg"
FIELD_KEY_LEVEL = "level"
FIELD_KEY_TIME = "time"
FIELD_KEY_ERROR = "fieldlog_error"
FIELD_KEY_FUNC = "func"
FIELD_KEY_FILE = "file"

CLASH_PREFIX = "fields."

_UNRENDERABLE = (
    types.FunctionType,
    types.MethodType,
    types.BuiltinFunctionType,
    types.BuiltinMethodType,
)


class FieldMap(dict[str, str]):
    """Renames default output keys, e.g. ``FieldMap({"msg": "message"})``."""

    def resolve(self, key: str) -> str:
        return self.get(key, key)


def merge_fields(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> Fields:
    """Return a new dict holding *base* overlaid with *overlay*.

    Neither argument is modified; on key collision *overlay* wins.
    """
    data: Fields = dict(base)
    data.update(overlay)
    return data


def prefix_field_clashes(
    data: Fields,
    field_map: FieldMap | None = None,
    report_caller: bool = False,
) -> None:
    """Move user fields that collide with reserved keys to ``fields.<key>``.

    *data* must be the formatter's private copy.
    """
    field_map = field_map or FieldMap()
    reserved = [FIELD_KEY_TIME, FIELD_KEY_MSG, FIELD_KEY_LEVEL, FIELD_KEY_ERROR]
    # func/file only clash when the formatter will emit them
    if report_caller:
        reserved += [FIELD_KEY_FUNC, FIELD_KEY_FILE]
    for src_key in reserved:
        dest_key = field_map.resolve(src_key)
        if dest_key in data:
            data[CLASH_PREFIX + dest_key] = data.pop(dest_key)


def unrenderable_fields(data: Mapping[str, Any]) -> list[str]:
    """Keys whose values are functions or methods and cannot be rendered."""
    return [key for key, value in data.items() if isinstance(value, _UNRENDERABLE)]


def strip_unrenderable(data: Fields) -> str:
    """Drop unrenderable values from *data* in place.

    Returns the sentinel text for the ``fieldlog_error`` key, or ``""``.
    """
    bad = unrenderable_fields(data)
    for key in bad:
        del data[key]
    return ", ".join(f'can not add field "{key}"' for key in bad)


__all__ = [
    "CLASH_PREFIX",
    "FIELD_KEY_ERROR",
    "FIELD_KEY_FILE",
    "FIELD_KEY_FUNC",
    "FIELD_KEY_LEVEL",
    "FIELD_KEY_MSG",
    "FIELD_KEY_TIME",
    "FieldMap",
    "Fields",
    "merge_fields",
    "prefix_field_clashes",
    "strip_unrenderable",
    "unrenderable_fields",
]
