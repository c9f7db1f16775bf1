"""FieldLogger – the logging surface shared by :class:`Logger` and :class:`Entry`.

Every terminal method funnels into :meth:`FieldLogger._dispatch`, which checks
the owning logger's threshold before a message is built or an entry is
allocated. Three message conventions are offered per level:

* ``info(*args)``    – print-style, see :func:`mp_fieldlog.message.sprint`
* ``infof(fmt, *args)`` – printf-style ``%``-interpolation
* ``infoln(*args)``  – println-style, always space-separated

plus ``info_fn(fn)``, which calls *fn* only when the level is enabled.
"""
from __future__ import annotations

import abc
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Any

from mp_fieldlog.level import Level
from mp_fieldlog.message import safe_str, sprint, sprintf, sprintln

if TYPE_CHECKING:
    from mp_fieldlog.entry import Entry
    from mp_fieldlog.logger import Logger

LogFunction = Callable[[], Any]


def _render_fn(fn: LogFunction) -> str:
    try:
        result = fn()
    except Exception as exc:  # noqa: BLE001
        return f"%!v(PANIC=log function: {type(exc).__name__}: {safe_str(exc)})"
    if isinstance(result, (list, tuple)):
        return sprint(*result)
    return sprint(result)


class FieldLogger(abc.ABC):
    """Abstract base: builders plus one terminal method per level and style."""

    # ------------------------------------------------------------------
    # Hooks for subclasses
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def _owner(self) -> Logger: ...

    @abc.abstractmethod
    def _emit(self, level: Level, message: str) -> None: ...

    def _dispatch(self, level: Level, render: Callable[..., str], *args: Any) -> None:
        owner = self._owner()
        if owner.is_level_enabled(level):
            self._emit(level, render(*args))
        elif level == Level.FATAL:
            # FATAL terminates even when the threshold filters it out
            owner.exit(1)

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def with_field(self, key: str, value: Any) -> Entry: ...

    @abc.abstractmethod
    def with_fields(self, fields: Mapping[str, Any]) -> Entry: ...

    @abc.abstractmethod
    def with_error(self, err: BaseException) -> Entry: ...

    @abc.abstractmethod
    def with_time(self, time: datetime) -> Entry: ...

    @abc.abstractmethod
    def with_context(self, context: Any) -> Entry: ...

    # ------------------------------------------------------------------
    # Generic forms
    # ------------------------------------------------------------------

    def log(self, level: Level, *args: Any) -> None:
        self._dispatch(level, sprint, *args)

    def logf(self, level: Level, format: str, *args: Any) -> None:  # noqa: A002
        self._dispatch(level, sprintf, format, *args)

    def logln(self, level: Level, *args: Any) -> None:
        self._dispatch(level, sprintln, *args)

    def log_fn(self, level: Level, fn: LogFunction) -> None:
        self._dispatch(level, _render_fn, fn)

    # ------------------------------------------------------------------
    # print-style
    # ------------------------------------------------------------------

    def trace(self, *args: Any) -> None:
        self.log(Level.TRACE, *args)

    def debug(self, *args: Any) -> None:
        self.log(Level.DEBUG, *args)

    def info(self, *args: Any) -> None:
        self.log(Level.INFO, *args)

    def print(self, *args: Any) -> None:  # noqa: A003
        self.info(*args)

    def warn(self, *args: Any) -> None:
        self.log(Level.WARN, *args)

    def warning(self, *args: Any) -> None:
        self.warn(*args)

    def error(self, *args: Any) -> None:
        self.log(Level.ERROR, *args)

    def fatal(self, *args: Any) -> None:
        self.log(Level.FATAL, *args)

    def panic(self, *args: Any) -> None:
        self.log(Level.PANIC, *args)

    # ------------------------------------------------------------------
    # printf-style
    # ------------------------------------------------------------------

    def tracef(self, format: str, *args: Any) -> None:  # noqa: A002
        self.logf(Level.TRACE, format, *args)

    def debugf(self, format: str, *args: Any) -> None:  # noqa: A002
        self.logf(Level.DEBUG, format, *args)

    def infof(self, format: str, *args: Any) -> None:  # noqa: A002
        self.logf(Level.INFO, format, *args)

    def printf(self, format: str, *args: Any) -> None:  # noqa: A002
        self.infof(format, *args)

    def warnf(self, format: str, *args: Any) -> None:  # noqa: A002
        self.logf(Level.WARN, format, *args)

    def warningf(self, format: str, *args: Any) -> None:  # noqa: A002
        self.warnf(format, *args)

    def errorf(self, format: str, *args: Any) -> None:  # noqa: A002
        self.logf(Level.ERROR, format, *args)

    def fatalf(self, format: str, *args: Any) -> None:  # noqa: A002
        self.logf(Level.FATAL, format, *args)

    def panicf(self, format: str, *args: Any) -> None:  # noqa: A002
        self.logf(Level.PANIC, format, *args)

    # ------------------------------------------------------------------
    # println-style
    # ------------------------------------------------------------------

    def traceln(self, *args: Any) -> None:
        self.logln(Level.TRACE, *args)

    def debugln(self, *args: Any) -> None:
        self.logln(Level.DEBUG, *args)

    def infoln(self, *args: Any) -> None:
        self.logln(Level.INFO, *args)

    def println(self, *args: Any) -> None:
        self.infoln(*args)

    def warnln(self, *args: Any) -> None:
        self.logln(Level.WARN, *args)

    def warningln(self, *args: Any) -> None:
        self.warnln(*args)

    def errorln(self, *args: Any) -> None:
        self.logln(Level.ERROR, *args)

    def fatalln(self, *args: Any) -> None:
        self.logln(Level.FATAL, *args)

    def panicln(self, *args: Any) -> None:
        self.logln(Level.PANIC, *args)

    # ------------------------------------------------------------------
    # Lazy messages
    # ------------------------------------------------------------------

    def trace_fn(self, fn: LogFunction) -> None:
        self.log_fn(Level.TRACE, fn)

    def debug_fn(self, fn: LogFunction) -> None:
        self.log_fn(Level.DEBUG, fn)

    def info_fn(self, fn: LogFunction) -> None:
        self.log_fn(Level.INFO, fn)

    def print_fn(self, fn: LogFunction) -> None:
        self.info_fn(fn)

    def warn_fn(self, fn: LogFunction) -> None:
        self.log_fn(Level.WARN, fn)

    def warning_fn(self, fn: LogFunction) -> None:
        self.warn_fn(fn)

    def error_fn(self, fn: LogFunction) -> None:
        self.log_fn(Level.ERROR, fn)

    def fatal_fn(self, fn: LogFunction) -> None:
        self.log_fn(Level.FATAL, fn)

    def panic_fn(self, fn: LogFunction) -> None:
        self.log_fn(Level.PANIC, fn)


__all__ = ["FieldLogger", "LogFunction"]
