"""StructlogFormatter – render entries through a structlog processor chain.

The entry becomes a structlog event dict (``event``, ``level``,
``timestamp`` plus the user fields) and is passed through *processors*, the
last of which must be a renderer returning ``str`` or ``bytes``::

    import structlog
    from mp_fieldlog.formatters import StructlogFormatter

    logger.set_formatter(StructlogFormatter(processors=[
        structlog.processors.add_log_level,
        structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"]),
    ]))
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

import structlog

from mp_fieldlog.fields import CLASH_PREFIX, strip_unrenderable
from mp_fieldlog.formatters.base import CallerPrettyfier, caller_values, format_timestamp

if TYPE_CHECKING:
    from mp_fieldlog.entry import Entry

Processor = Any

_RESERVED = ("event", "level", "timestamp", "func", "file", "fieldlog_error")


def default_processors() -> list[Processor]:
    return [
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer(sort_keys=True),
    ]


class StructlogFormatter:
    """Adapts a structlog processor chain to the :class:`Formatter` protocol."""

    def __init__(
        self,
        processors: Iterable[Processor] | None = None,
        *,
        timestamp_format: str | None = None,
        caller_prettyfier: CallerPrettyfier | None = None,
    ) -> None:
        self._processors = list(processors) if processors is not None else default_processors()
        self.timestamp_format = timestamp_format
        self.caller_prettyfier = caller_prettyfier

    def event_dict(self, entry: Entry) -> dict[str, Any]:
        """Build the structlog event dict for *entry*."""
        fields: dict[str, Any] = {
            key: str(value) if isinstance(value, BaseException) else value
            for key, value in entry.data.items()
        }
        field_err = strip_unrenderable(fields)
        for key in _RESERVED:
            if key in fields:
                fields[CLASH_PREFIX + key] = fields.pop(key)

        event: dict[str, Any] = {
            "event": entry.message,
            "level": str(entry.level),
            "timestamp": format_timestamp(entry.time, self.timestamp_format),
            **fields,
        }
        if field_err:
            event["fieldlog_error"] = field_err
        func_val, file_val = caller_values(entry, self.caller_prettyfier)
        if func_val:
            event["func"] = func_val
        if file_val:
            event["file"] = file_val
        return event

    def format(self, entry: Entry) -> bytes:
        result: Any = self.event_dict(entry)
        method_name = str(entry.level)
        for processor in self._processors:
            result = processor(None, method_name, result)
        if isinstance(result, str):
            result = result.encode("utf-8")
        if not isinstance(result, bytes):
            raise TypeError(
                f"last structlog processor must render str or bytes, got {type(result).__name__}"
            )
        return result if result.endswith(b"\n") else result + b"\n"


__all__ = ["StructlogFormatter", "default_processors"]
