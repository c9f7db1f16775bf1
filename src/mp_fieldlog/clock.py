"""Clock protocol + implementations used to timestamp entries."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: abstract clock for deterministic testing."""

    def now(self) -> datetime: ...


class SystemClock:
    """Production clock that delegates to ``datetime.now(UTC)``."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """Test clock pinned to a fixed point in time."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)


__all__ = ["Clock", "FrozenClock", "SystemClock"]
