"""conftest.py for benchmarks.

Every benchmark logs into an in-memory sink so timings measure the logging
path only, never terminal or disk I/O.
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from mp_fieldlog import FrozenClock, Level, Logger


class _DiscardingSink:
    """Counts bytes instead of storing them, so memory stays flat across rounds."""

    def __init__(self) -> None:
        self.written = 0

    def write(self, data: bytes) -> int:
        self.written += len(data)
        return len(data)


@pytest.fixture
def sink() -> _DiscardingSink:
    return _DiscardingSink()


@pytest.fixture
def bench_logger(sink: _DiscardingSink) -> Logger:
    """INFO-level logger with a frozen clock and a counting sink."""
    return Logger(
        out=sink,
        level=Level.INFO,
        clock=FrozenClock(datetime(2026, 1, 1, tzinfo=UTC)),
    )
