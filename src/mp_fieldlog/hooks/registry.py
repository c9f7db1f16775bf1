"""Hook protocol and the per-level hook registry.

Hooks run synchronously on the logging thread, after the entry is populated
and before it is formatted. A hook signals failure by raising.
"""
from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from mp_fieldlog.level import Level

if TYPE_CHECKING:
    from mp_fieldlog.entry import Entry


@runtime_checkable
class Hook(Protocol):
    """Side-effect handler fired for the levels it declares."""

    def levels(self) -> Iterable[Level]: ...

    def fire(self, entry: Entry) -> None: ...


class LevelHooks:
    """Maps each level to the hooks registered for it, in registration order.

    Writers build a new level -> tuple mapping under a lock and swap it in,
    so :meth:`fire` never observes a partially appended list and needs no
    lock of its own.
    """

    def __init__(self, hooks: Iterable[Hook] = ()) -> None:
        self._lock = threading.Lock()
        self._by_level: dict[Level, tuple[Hook, ...]] = {}
        for hook in hooks:
            self.add(hook)

    def add(self, hook: Hook) -> None:
        """Register *hook* for every level in ``hook.levels()``.

        ``levels()`` is queried once, here.
        """
        levels = [Level(level) for level in hook.levels()]
        with self._lock:
            by_level = dict(self._by_level)
            for level in levels:
                by_level[level] = by_level.get(level, ()) + (hook,)
            self._by_level = by_level

    def for_level(self, level: Level) -> tuple[Hook, ...]:
        return self._by_level.get(level, ())

    def fire(self, level: Level, entry: Entry, fire_all: bool = False) -> None:
        """Fire the hooks registered for *level* in registration order.

        The first exception stops the remaining hooks and is re-raised. With
        *fire_all* every hook runs and the failures are raised together as an
        :class:`ExceptionGroup`.
        """
        errors: list[Exception] = []
        for hook in self.for_level(level):
            try:
                hook.fire(entry)
            except Exception as exc:
                if not fire_all:
                    raise
                errors.append(exc)
        if errors:
            raise ExceptionGroup(f"{len(errors)} hook(s) failed", errors)

    def copy(self) -> LevelHooks:
        clone = LevelHooks()
        with self._lock:
            clone._by_level = dict(self._by_level)
        return clone

    def registered_levels(self) -> list[Level]:
        """Levels with at least one hook, most severe first."""
        return sorted(self._by_level)

    def __contains__(self, hook: object) -> bool:
        return any(hook in hooks for hooks in self._by_level.values())

    def __iter__(self) -> Iterator[Hook]:
        by_level = self._by_level
        seen: list[Hook] = []
        for level in sorted(by_level):
            for hook in by_level[level]:
                if not any(hook is other for other in seen):
                    seen.append(hook)
        return iter(seen)

    def __len__(self) -> int:
        return sum(len(hooks) for hooks in self._by_level.values())

    def __repr__(self) -> str:
        counts = {str(level): len(hooks) for level, hooks in sorted(self._by_level.items())}
        return f"LevelHooks({counts})"


__all__ = ["Hook", "LevelHooks"]
