"""ContextVarsHook – merge structlog context variables into entries.

Request-scoped values bound with :func:`structlog.contextvars.bind_contextvars`
(correlation id, tenant, user …) appear on every entry logged in that
context. Fields set explicitly on the entry take precedence.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import structlog

from mp_fieldlog.level import ALL_LEVELS, Level

if TYPE_CHECKING:
    from mp_fieldlog.entry import Entry


class ContextVarsHook:
    def __init__(self, levels: Iterable[Level] = ALL_LEVELS) -> None:
        self._levels = tuple(levels)

    def levels(self) -> tuple[Level, ...]:
        return self._levels

    def fire(self, entry: Entry) -> None:
        bound = structlog.contextvars.get_contextvars()
        for key, value in bound.items():
            entry.data.setdefault(key, value)


__all__ = ["ContextVarsHook"]
