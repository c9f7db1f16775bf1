"""Unit tests for the per-level hook registry."""

from __future__ import annotations

import threading
from typing import Any

import pytest

from mp_fieldlog import Entry, Level, LevelHooks, Logger
from mp_fieldlog.sinks import NullSink


class RecordingHook:
    def __init__(self, name: str, calls: list[str], levels: Any = (Level.ERROR,), fail: bool = False) -> None:
        self.name = name
        self.calls = calls
        self._levels = levels
        self.fail = fail

    def levels(self) -> Any:
        return self._levels

    def fire(self, entry: Entry) -> None:
        self.calls.append(self.name)
        if self.fail:
            raise RuntimeError(f"{self.name} failed")


@pytest.fixture
def entry() -> Entry:
    return Entry(Logger(out=NullSink()))


class TestAdd:
    def test_registers_for_each_declared_level(self) -> None:
        hooks = LevelHooks()
        hook = RecordingHook("h", [], levels=[Level.ERROR, Level.WARN])
        hooks.add(hook)
        assert hooks.for_level(Level.ERROR) == (hook,)
        assert hooks.for_level(Level.WARN) == (hook,)
        assert hooks.for_level(Level.INFO) == ()
        assert len(hooks) == 2
        assert hook in hooks

    def test_levels_queried_once(self) -> None:
        class CountingHook(RecordingHook):
            queried = 0

            def levels(self) -> Any:
                CountingHook.queried += 1
                return [Level.INFO]

        hooks = LevelHooks()
        hooks.add(CountingHook("c", []))
        hooks.for_level(Level.INFO)
        assert CountingHook.queried == 1

    def test_iterates_unique_hooks(self) -> None:
        hooks = LevelHooks()
        a = RecordingHook("a", [], levels=[Level.ERROR, Level.INFO])
        b = RecordingHook("b", [], levels=[Level.INFO])
        hooks.add(a)
        hooks.add(b)
        assert list(hooks) == [a, b]
        assert hooks.registered_levels() == [Level.ERROR, Level.INFO]

    def test_concurrent_add(self) -> None:
        hooks = LevelHooks()
        calls: list[str] = []

        def register(i: int) -> None:
            hooks.add(RecordingHook(str(i), calls))

        threads = [threading.Thread(target=register, args=(i,)) for i in range(50)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(hooks.for_level(Level.ERROR)) == 50

    def test_copy_is_independent(self) -> None:
        hooks = LevelHooks([RecordingHook("a", [])])
        clone = hooks.copy()
        clone.add(RecordingHook("b", []))
        assert len(hooks) == 1
        assert len(clone) == 2


class TestFire:
    def test_registration_order(self, entry: Entry) -> None:
        calls: list[str] = []
        hooks = LevelHooks([RecordingHook("h1", calls), RecordingHook("h2", calls)])
        hooks.fire(Level.ERROR, entry)
        assert calls == ["h1", "h2"]

    def test_only_matching_level(self, entry: Entry) -> None:
        calls: list[str] = []
        hooks = LevelHooks([RecordingHook("h1", calls)])
        hooks.fire(Level.INFO, entry)
        assert calls == []

    def test_first_error_short_circuits(self, entry: Entry) -> None:
        calls: list[str] = []
        hooks = LevelHooks([RecordingHook("h1", calls, fail=True), RecordingHook("h2", calls)])
        with pytest.raises(RuntimeError, match="h1 failed"):
            hooks.fire(Level.ERROR, entry)
        assert calls == ["h1"]

    def test_fire_all_collects_errors(self, entry: Entry) -> None:
        calls: list[str] = []
        hooks = LevelHooks([
            RecordingHook("h1", calls, fail=True),
            RecordingHook("h2", calls),
            RecordingHook("h3", calls, fail=True),
        ])
        with pytest.raises(ExceptionGroup) as exc_info:
            hooks.fire(Level.ERROR, entry, fire_all=True)
        assert calls == ["h1", "h2", "h3"]
        assert [str(e) for e in exc_info.value.exceptions] == ["h1 failed", "h3 failed"]

    def test_fire_during_add_sees_consistent_list(self, entry: Entry) -> None:
        hooks = LevelHooks()
        calls: list[str] = []
        stop = threading.Event()

        def writer() -> None:
            i = 0
            while not stop.is_set() and i < 500:
                hooks.add(RecordingHook(str(i), calls))
                i += 1

        thread = threading.Thread(target=writer)
        thread.start()
        try:
            for _ in range(200):
                snapshot = hooks.for_level(Level.ERROR)
                assert all(isinstance(h, RecordingHook) for h in snapshot)
                hooks.fire(Level.ERROR, entry)
        finally:
            stop.set()
            thread.join()
