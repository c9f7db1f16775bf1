"""TextFormatter – logfmt-style lines, colored on terminals.

Plain::

    time="2026-01-01T12:00:00Z" level=info msg="order placed" order_id=42

Colored (TTY or ``force_colors``)::

    INFO[0003] order placed                                 order_id=42
"""
from __future__ import annotations

import json
import os
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

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
from mp_fieldlog.level import ALL_LEVELS, Level

if TYPE_CHECKING:
    from mp_fieldlog.entry import Entry

RED = 31
YELLOW = 33
BLUE = 36
GRAY = 37

_BASE_TIME = datetime.now(UTC)
_MAX_LEVEL_LEN = max(len(str(level)) for level in ALL_LEVELS)
_SAFE_CHARS = frozenset("-._/@^+")


def _level_color(level: Level | None) -> int:
    if level in (Level.DEBUG, Level.TRACE):
        return GRAY
    if level == Level.WARN:
        return YELLOW
    if level in (Level.ERROR, Level.FATAL, Level.PANIC):
        return RED
    return BLUE


class TextFormatter:
    """Formats entries as ``key=value`` text.

    Parameters
    ----------
    force_colors / disable_colors:
        Override TTY detection of the logger's sink.
    environment_override_colors:
        Honour ``CLICOLOR`` / ``CLICOLOR_FORCE``.
    force_quote / disable_quote / quote_empty_fields:
        Value quoting policy.
    disable_timestamp / full_timestamp / timestamp_format:
        Colored output shows seconds since start unless ``full_timestamp``.
    disable_sorting / sorting_func:
        Field ordering; ``sorting_func`` receives the full key list.
    disable_level_truncation / pad_level_text:
        Colored level label as ``INFO`` / ``WARNING`` / ``INFO   ``.
    field_map:
        Renames the default keys.
    caller_prettyfier:
        Customises ``func`` / ``file`` output.
    """

    def __init__(
        self,
        *,
        force_colors: bool = False,
        disable_colors: bool = False,
        environment_override_colors: bool = False,
        force_quote: bool = False,
        disable_quote: bool = False,
        quote_empty_fields: bool = False,
        disable_timestamp: bool = False,
        full_timestamp: bool = False,
        timestamp_format: str | None = None,
        disable_sorting: bool = False,
        sorting_func: Callable[[list[str]], None] | None = None,
        disable_level_truncation: bool = False,
        pad_level_text: bool = False,
        field_map: FieldMap | None = None,
        caller_prettyfier: CallerPrettyfier | None = None,
    ) -> None:
        self.force_colors = force_colors
        self.disable_colors = disable_colors
        self.environment_override_colors = environment_override_colors
        self.force_quote = force_quote
        self.disable_quote = disable_quote
        self.quote_empty_fields = quote_empty_fields
        self.disable_timestamp = disable_timestamp
        self.full_timestamp = full_timestamp
        self.timestamp_format = timestamp_format
        self.disable_sorting = disable_sorting
        self.sorting_func = sorting_func
        self.disable_level_truncation = disable_level_truncation
        self.pad_level_text = pad_level_text
        self.field_map = field_map or FieldMap()
        self.caller_prettyfier = caller_prettyfier

    # ------------------------------------------------------------------
    # Formatter interface
    # ------------------------------------------------------------------

    def format(self, entry: Entry) -> bytes:
        resolve = self.field_map.resolve
        data = dict(entry.data)
        prefix_field_clashes(data, self.field_map, entry.has_caller())
        field_err = strip_unrenderable(data)
        func_val, file_val = caller_values(entry, self.caller_prettyfier)

        keys = list(data)
        fixed_keys: list[str] = []
        if not self.disable_timestamp:
            fixed_keys.append(resolve(FIELD_KEY_TIME))
        fixed_keys.append(resolve(FIELD_KEY_LEVEL))
        if entry.message:
            fixed_keys.append(resolve(FIELD_KEY_MSG))
        if field_err:
            fixed_keys.append(resolve(FIELD_KEY_ERROR))
        if func_val:
            fixed_keys.append(resolve(FIELD_KEY_FUNC))
        if file_val:
            fixed_keys.append(resolve(FIELD_KEY_FILE))

        colored = self._is_colored(entry)
        if not self.disable_sorting and self.sorting_func is None:
            keys.sort()
            fixed_keys.extend(keys)
        else:
            fixed_keys.extend(keys)
            if not self.disable_sorting and self.sorting_func is not None:
                # colored output prints only the user keys
                self.sorting_func(keys if colored else fixed_keys)

        if colored:
            if field_err:
                data[resolve(FIELD_KEY_ERROR)] = field_err
                keys.append(resolve(FIELD_KEY_ERROR))
            line = self._format_colored(entry, keys, data, func_val, file_val)
        else:
            fixed = {
                resolve(FIELD_KEY_TIME): lambda: format_timestamp(entry.time, self.timestamp_format),
                resolve(FIELD_KEY_LEVEL): lambda: str(entry.level),
                resolve(FIELD_KEY_MSG): lambda: entry.message,
                resolve(FIELD_KEY_ERROR): lambda: field_err,
                resolve(FIELD_KEY_FUNC): lambda: func_val,
                resolve(FIELD_KEY_FILE): lambda: file_val,
            }
            parts = []
            for key in fixed_keys:
                value = data[key] if key in data else fixed[key]()
                parts.append(f"{key}={self._render_value(value)}")
            line = " ".join(parts)
        return (line + "\n").encode("utf-8")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _is_colored(self, entry: Entry) -> bool:
        out = entry.logger.out
        isatty = getattr(out, "isatty", None)
        colored = self.force_colors or bool(isatty and isatty())

        if self.environment_override_colors:
            force = os.environ.get("CLICOLOR_FORCE")
            if force is not None and force != "0":
                colored = True
            elif os.environ.get("CLICOLOR") == "0":
                colored = False
        return colored and not self.disable_colors

    def _level_text(self, level: Level | None) -> str:
        text = str(level).upper() if level is not None else "UNKNOWN"
        if self.pad_level_text:
            return text.ljust(_MAX_LEVEL_LEN)
        if not self.disable_level_truncation:
            return text[:4]
        return text

    def _format_colored(
        self,
        entry: Entry,
        keys: list[str],
        data: dict[str, Any],
        func_val: str,
        file_val: str,
    ) -> str:
        color = _level_color(entry.level)
        level_text = self._level_text(entry.level)
        caller = " ".join(part for part in (file_val, func_val) if part)
        if caller:
            caller = " " + caller
        message = entry.message.removesuffix("\n")

        label = f"\x1b[{color}m{level_text}\x1b[0m"
        if self.disable_timestamp:
            head = f"{label}{caller} {message:<44} "
        elif not self.full_timestamp:
            elapsed = int(((entry.time or _BASE_TIME) - _BASE_TIME).total_seconds())
            head = f"{label}[{elapsed:04d}]{caller} {message:<44} "
        else:
            stamp = format_timestamp(entry.time, self.timestamp_format)
            head = f"{label}[{stamp}]{caller} {message:<44} "

        tail = "".join(
            f" \x1b[{color}m{key}\x1b[0m={self._render_value(data[key])}" for key in keys
        )
        return head + tail

    def _needs_quoting(self, text: str) -> bool:
        if self.force_quote:
            return True
        if self.quote_empty_fields and not text:
            return True
        if self.disable_quote:
            return False
        return any(not (ch.isascii() and ch.isalnum()) and ch not in _SAFE_CHARS for ch in text)

    def _render_value(self, value: Any) -> str:
        text = value if isinstance(value, str) else str(value)
        if not self._needs_quoting(text):
            return text
        return json.dumps(text, ensure_ascii=False)


__all__ = ["TextFormatter"]
