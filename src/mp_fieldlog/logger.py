"""Logger – owns the sink, formatter, hooks and level threshold.

Typical usage::

    from mp_fieldlog import JSONFormatter, Level, Logger

    log = Logger(level=Level.DEBUG, formatter=JSONFormatter())
    log.with_fields({"order_id": 42, "tenant": "acme"}).info("order placed")

Concurrency
-----------
One logger is meant to be shared by many threads. The sink write is
serialised by a re-entrant lock (``set_no_lock`` opts out for sinks that are
safe for concurrent appends). ``formatter``/``out`` swaps take the same lock.
The level threshold is a plain attribute: loads and stores of a reference are
atomic under the interpreter, so ``is_level_enabled`` never blocks.
"""
from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Any

from mp_fieldlog import exit_handlers
from mp_fieldlog.clock import Clock, SystemClock
from mp_fieldlog.entry import Entry
from mp_fieldlog.formatters.base import Formatter
from mp_fieldlog.formatters.text_formatter import TextFormatter
from mp_fieldlog.hooks.registry import Hook, LevelHooks
from mp_fieldlog.level import Level
from mp_fieldlog.protocol import FieldLogger
from mp_fieldlog.sinks import Sink, StderrSink

if TYPE_CHECKING:
    from mp_fieldlog.config.settings import LoggerSettings
    from mp_fieldlog.writer import LogWriter

ExitFunc = Callable[[int], Any]


class _MutexWrap:
    """Lock that can be switched off.

    Each thread remembers whether its own ``__enter__`` acquired the lock, so
    toggling ``disabled`` while the lock is held never leaks or over-releases it.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._acquired = threading.local()
        self.disabled = False

    def __enter__(self) -> _MutexWrap:
        stack: list[bool] | None = getattr(self._acquired, "stack", None)
        if stack is None:
            stack = self._acquired.stack = []
        acquired = not self.disabled
        if acquired:
            self._lock.acquire()
        stack.append(acquired)
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._acquired.stack.pop():
            self._lock.release()

    def enable(self) -> None:
        self.disabled = False

    def disable(self) -> None:
        self.disabled = True


class Logger(FieldLogger):
    """Structured logger.

    Parameters
    ----------
    out:
        Sink receiving formatted bytes. Defaults to stderr.
    formatter:
        Defaults to :class:`~mp_fieldlog.formatters.TextFormatter`.
    hooks:
        Pre-populated hook registry.
    level:
        Threshold; calls less severe than this are dropped. Default ``INFO``.
    report_caller:
        Record the calling frame on every entry.
    exit_func:
        Called with the exit code after exit handlers on FATAL.
        Defaults to :func:`sys.exit`.
    fire_all_hooks:
        Keep firing hooks after one fails.
    clock:
        Source of entry timestamps.
    """

    def __init__(
        self,
        out: Sink | None = None,
        formatter: Formatter | None = None,
        hooks: LevelHooks | None = None,
        level: Level | str = Level.INFO,
        report_caller: bool = False,
        exit_func: ExitFunc | None = None,
        fire_all_hooks: bool = False,
        clock: Clock | None = None,
    ) -> None:
        self.out: Sink = out if out is not None else StderrSink()
        self.formatter: Formatter = formatter if formatter is not None else TextFormatter()
        self.hooks = hooks if hooks is not None else LevelHooks()
        self.level = Level.parse(level)
        self.report_caller = report_caller
        self.exit_func: ExitFunc = exit_func if exit_func is not None else sys.exit
        self.fire_all_hooks = fire_all_hooks
        self.clock: Clock = clock if clock is not None else SystemClock()
        self.mu = _MutexWrap()

    @classmethod
    def from_settings(cls, settings: LoggerSettings, **kwargs: Any) -> Logger:
        """Build a logger configured from :class:`LoggerSettings`."""
        from mp_fieldlog.config.settings import configure

        logger = cls(**kwargs)
        configure(logger, settings)
        return logger

    def __repr__(self) -> str:
        return (
            f"Logger(level={self.level!s}, formatter={type(self.formatter).__name__}, "
            f"hooks={len(self.hooks)})"
        )

    # ------------------------------------------------------------------
    # Level
    # ------------------------------------------------------------------

    def set_level(self, level: Level | str) -> None:
        self.level = Level.parse(level)

    def get_level(self) -> Level:
        return self.level

    def is_level_enabled(self, level: Level) -> bool:
        return self.level >= level

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def add_hook(self, hook: Hook) -> None:
        self.hooks.add(hook)

    def replace_hooks(self, hooks: LevelHooks) -> LevelHooks:
        """Install *hooks* and return the previous registry."""
        with self.mu:
            old, self.hooks = self.hooks, hooks
        return old

    def set_output(self, out: Sink) -> None:
        with self.mu:
            self.out = out

    def set_formatter(self, formatter: Formatter) -> None:
        with self.mu:
            self.formatter = formatter

    def set_report_caller(self, report_caller: bool) -> None:
        with self.mu:
            self.report_caller = report_caller

    def set_no_lock(self) -> None:
        """Stop serialising sink writes.

        Only for sinks that are safe for concurrent appends, e.g. a file opened
        in append mode with writes below the OS atomicity limit.
        """
        self.mu.disable()

    def snapshot_output(self) -> tuple[Formatter, Sink]:
        with self.mu:
            return self.formatter, self.out

    def exit(self, code: int = 0) -> None:
        """Run the exit handlers, then ``exit_func(code)``."""
        exit_handlers.run_exit_handlers()
        self.exit_func(code)

    def writer(self, level: Level = Level.INFO) -> LogWriter:
        """A file-like object that logs each written line at *level*."""
        from mp_fieldlog.writer import LogWriter

        return LogWriter(Entry(self), level)

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    def with_field(self, key: str, value: Any) -> Entry:
        return Entry(self).with_field(key, value)

    def with_fields(self, fields: Mapping[str, Any]) -> Entry:
        return Entry(self).with_fields(fields)

    def with_error(self, err: BaseException) -> Entry:
        return Entry(self).with_error(err)

    def with_time(self, time: datetime) -> Entry:
        return Entry(self, time=time)

    def with_context(self, context: Any) -> Entry:
        return Entry(self, context=context)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _owner(self) -> Logger:
        return self

    def _emit(self, level: Level, message: str) -> None:
        Entry(self)._log(level, message)


__all__ = ["ExitFunc", "Logger"]
