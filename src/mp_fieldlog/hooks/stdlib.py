"""StdlibLoggingHook – forward entries to a standard library logger."""
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from mp_fieldlog.level import ALL_LEVELS, Level

if TYPE_CHECKING:
    from mp_fieldlog.entry import Entry

LEVEL_TO_STDLIB: dict[Level, int] = {
    Level.PANIC: logging.CRITICAL,
    Level.FATAL: logging.CRITICAL,
    Level.ERROR: logging.ERROR,
    Level.WARN: logging.WARNING,
    Level.INFO: logging.INFO,
    Level.DEBUG: logging.DEBUG,
    Level.TRACE: 5,
}


class StdlibLoggingHook:
    """Re-emits every matching entry on *logger*.

    Entry fields are attached to the record as ``fields`` (``extra``), so
    stdlib handlers and formatters can reach them via ``record.fields``.
    """

    def __init__(self, logger: logging.Logger, levels: Iterable[Level] = ALL_LEVELS) -> None:
        self.logger = logger
        self._levels = tuple(levels)

    def levels(self) -> tuple[Level, ...]:
        return self._levels

    def fire(self, entry: Entry) -> None:
        level = LEVEL_TO_STDLIB.get(entry.level, logging.INFO)  # type: ignore[arg-type]
        self.logger.log(level, "%s", entry.message, extra={"fields": dict(entry.data)})


__all__ = ["LEVEL_TO_STDLIB", "StdlibLoggingHook"]
