"""Output sinks.

A sink is anything with ``write(data: bytes)``. The core assumes no flush or
close contract; sink lifecycle belongs to the embedder.
"""
from __future__ import annotations

import sys
from typing import Protocol, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    def write(self, data: bytes, /) -> object: ...


class StderrSink:
    """Writes to whatever ``sys.stderr`` is at write time."""

    def write(self, data: bytes) -> int:
        stream = sys.stderr
        buffer = getattr(stream, "buffer", None)
        if buffer is not None:
            written = buffer.write(data)
        else:
            written = stream.write(data.decode("utf-8", errors="replace"))
        stream.flush()
        return written

    def isatty(self) -> bool:
        return sys.stderr.isatty()


class TextStreamSink:
    """Adapts a text stream (``io.StringIO``, an open text file …) to a sink."""

    def __init__(self, stream, encoding: str = "utf-8") -> None:
        self._stream = stream
        self._encoding = encoding

    def write(self, data: bytes) -> int:
        return self._stream.write(data.decode(self._encoding, errors="replace"))

    def isatty(self) -> bool:
        isatty = getattr(self._stream, "isatty", None)
        return bool(isatty and isatty())


class NullSink:
    """Discards everything."""

    def write(self, data: bytes) -> int:
        return len(data)


__all__ = ["NullSink", "Sink", "StderrSink", "TextStreamSink"]
