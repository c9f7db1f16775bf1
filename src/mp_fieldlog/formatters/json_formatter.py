"""JSONFormatter – one JSON object per line."""
from __future__ import annotations

import dataclasses
import json
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from mp_fieldlog.errors import FieldlogError
from mp_fieldlog.fields import (
    FIELD_KEY_ERROR,
    FIELD_KEY_FILE,
    FIELD_KEY_FUNC,
    FIELD_KEY_LEVEL,
    FIELD_KEY_MSG,
    FIELD_KEY_TIME,
    FieldMap,
    prefix_field_clashes,
    strip_unrenderable,
)
from mp_fieldlog.formatters.base import CallerPrettyfier, caller_values, format_timestamp

if TYPE_CHECKING:
    from mp_fieldlog.entry import Entry

_HTML_ESCAPES = (("&", "\\u0026"), ("<", "\\u003c"), (">", "\\u003e"))


def _default_serializer(obj: Any) -> Any:
    if isinstance(obj, BaseException):
        return str(obj)
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=repr)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class JSONFormatter:
    """Formats entries as JSON.

    Parameters
    ----------
    timestamp_format:
        ``strftime`` pattern; RFC 3339 when ``None``.
    disable_timestamp:
        Omit the time key.
    disable_html_escape:
        Keep ``<``, ``>`` and ``&`` literal instead of ``\\u003c`` escapes.
    data_key:
        Nest user fields under this key instead of the top level.
    field_map:
        Renames the default keys, e.g. ``FieldMap({"msg": "message"})``.
    caller_prettyfier:
        Customises ``func`` / ``file`` output.
    pretty_print:
        Indent the output.
    """

    def __init__(
        self,
        *,
        timestamp_format: str | None = None,
        disable_timestamp: bool = False,
        disable_html_escape: bool = False,
        data_key: str = "",
        field_map: FieldMap | None = None,
        caller_prettyfier: CallerPrettyfier | None = None,
        pretty_print: bool = False,
    ) -> None:
        self.timestamp_format = timestamp_format
        self.disable_timestamp = disable_timestamp
        self.disable_html_escape = disable_html_escape
        self.data_key = data_key
        self.field_map = field_map or FieldMap()
        self.caller_prettyfier = caller_prettyfier
        self.pretty_print = pretty_print

    def format(self, entry: Entry) -> bytes:
        resolve = self.field_map.resolve
        data: dict[str, Any] = {
            key: str(value) if isinstance(value, BaseException) else value
            for key, value in entry.data.items()
        }
        field_err = strip_unrenderable(data)

        if self.data_key:
            data = {self.data_key: data}
        prefix_field_clashes(data, self.field_map, entry.has_caller())

        if field_err:
            data[resolve(FIELD_KEY_ERROR)] = field_err
        if not self.disable_timestamp:
            data[resolve(FIELD_KEY_TIME)] = format_timestamp(entry.time, self.timestamp_format)
        data[resolve(FIELD_KEY_MSG)] = entry.message
        data[resolve(FIELD_KEY_LEVEL)] = str(entry.level)

        func_val, file_val = caller_values(entry, self.caller_prettyfier)
        if func_val:
            data[resolve(FIELD_KEY_FUNC)] = func_val
        if file_val:
            data[resolve(FIELD_KEY_FILE)] = file_val

        try:
            text = json.dumps(
                data,
                default=_default_serializer,
                ensure_ascii=False,
                sort_keys=True,
                indent=2 if self.pretty_print else None,
            )
        except (TypeError, ValueError) as exc:
            raise FieldlogError(f"failed to marshal fields to JSON: {exc}", cause=exc) from exc

        if not self.disable_html_escape:
            for raw, escaped in _HTML_ESCAPES:
                text = text.replace(raw, escaped)
        return (text + "\n").encode("utf-8")


__all__ = ["JSONFormatter"]
