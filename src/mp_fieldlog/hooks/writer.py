"""WriterHook – copy entries of selected levels to another sink."""
from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from mp_fieldlog.formatters.base import Formatter
from mp_fieldlog.level import Level
from mp_fieldlog.sinks import Sink

if TYPE_CHECKING:
    from mp_fieldlog.entry import Entry


class WriterHook:
    """Writes each matching entry to *writer*.

    The entry is rendered with *formatter* when given, otherwise with the
    owning logger's formatter. Typical use: send errors to a separate file::

        logger.add_hook(WriterHook(errors_file, [Level.ERROR, Level.FATAL]))
    """

    def __init__(
        self,
        writer: Sink,
        levels: Iterable[Level],
        formatter: Formatter | None = None,
    ) -> None:
        self.writer = writer
        self._levels = tuple(levels)
        self.formatter = formatter

    def levels(self) -> tuple[Level, ...]:
        return self._levels

    def fire(self, entry: Entry) -> None:
        line = self.formatter.format(entry) if self.formatter is not None else entry.render()
        self.writer.write(line)


__all__ = ["WriterHook"]
