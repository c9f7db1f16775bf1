"""Formatter protocol and helpers shared by the bundled formatters."""
from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Callable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mp_fieldlog.caller import CallerFrame
    from mp_fieldlog.entry import Entry

#: Returns ``(function, file)`` to print for a caller; an empty string omits the key.
CallerPrettyfier = Callable[["CallerFrame"], tuple[str, str]]


@runtime_checkable
class Formatter(Protocol):
    """Renders an entry to bytes. Raising means the entry is dropped.

    Implementations must not change ``entry.level``, ``entry.message`` or
    ``entry.time``, and must not mutate ``entry.data`` in place.
    """

    def format(self, entry: Entry) -> bytes: ...


def format_timestamp(time: datetime | None, timestamp_format: str | None = None) -> str:
    """RFC 3339 by default (``Z`` for UTC), otherwise ``strftime``."""
    if time is None:
        return ""
    if timestamp_format:
        return time.strftime(timestamp_format)
    text = time.isoformat(timespec="seconds")
    return text[:-6] + "Z" if text.endswith("+00:00") else text


def caller_values(entry: Entry, prettyfier: CallerPrettyfier | None) -> tuple[str, str]:
    """``(func, file)`` for an entry with a caller, else ``("", "")``."""
    caller = entry.caller
    if caller is None or not entry.has_caller():
        return "", ""
    if prettyfier is not None:
        return prettyfier(caller)
    return caller.qualified_function, caller.location


__all__ = ["CallerPrettyfier", "Formatter", "caller_values", "format_timestamp"]
