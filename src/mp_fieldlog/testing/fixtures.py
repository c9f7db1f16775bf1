"""Testing fixtures – pytest fixtures for loggers and clocks.

Enable in your ``conftest.py``::

    pytest_plugins = ["mp_fieldlog.testing.fixtures"]
"""
from __future__ import annotations

from datetime import UTC, datetime

try:
    import pytest

    @pytest.fixture
    def fake_clock():
        """Pytest fixture: a FrozenClock pinned to 2026-01-01 12:00 UTC."""
        from mp_fieldlog.clock import FrozenClock
        return FrozenClock(datetime(2026, 1, 1, 12, 0, tzinfo=UTC))

    @pytest.fixture
    def null_logger(fake_clock):
        """Pytest fixture: ``(logger, capture_hook)`` with output discarded."""
        from mp_fieldlog.testing.capture import new_null_logger
        return new_null_logger(clock=fake_clock)

except ImportError:
    pass

__all__ = ["fake_clock", "null_logger"]
