"""LogWriter – a file-like object that turns written lines into log entries.

Useful to capture output of code that writes to a stream::

    with logger.writer(Level.WARN) as out, contextlib.redirect_stderr(out):
        legacy_function()

Each complete line becomes one entry at the writer's level; a trailing
partial line is logged on :meth:`LogWriter.flush` / :meth:`LogWriter.close`.
"""
from __future__ import annotations

import io
import threading
from typing import TYPE_CHECKING

from mp_fieldlog.level import Level

if TYPE_CHECKING:
    from mp_fieldlog.entry import Entry


class LogWriter(io.TextIOBase):
    """Text stream logging every line through *entry* at *level*."""

    def __init__(self, entry: Entry, level: Level = Level.INFO) -> None:
        super().__init__()
        self._entry = entry
        self._level = level
        self._pending = ""
        self._lock = threading.Lock()

    @property
    def level(self) -> Level:
        return self._level

    def writable(self) -> bool:
        return True

    def write(self, text: str | bytes) -> int:  # type: ignore[override]
        if self.closed:
            raise ValueError("I/O operation on closed LogWriter")
        if isinstance(text, bytes):
            text = text.decode("utf-8", errors="replace")
        with self._lock:
            lines = (self._pending + text).split("\n")
            self._pending = lines.pop()
        for line in lines:
            self._emit(line.removesuffix("\r"))
        return len(text)

    def flush(self) -> None:
        with self._lock:
            rest, self._pending = self._pending, ""
        if rest:
            self._emit(rest)

    def close(self) -> None:
        if not self.closed:
            self.flush()
        super().close()

    def _emit(self, line: str) -> None:
        self._entry.log(self._level, line)


__all__ = ["LogWriter"]
