"""Package-level API backed by one process-wide default logger.

The default logger is created at import, mutated only through the setters
below and never replaced. Code that needs isolation (tests in particular)
should build its own :class:`Logger`.
"""
from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from mp_fieldlog.entry import Entry
from mp_fieldlog.formatters.base import Formatter
from mp_fieldlog.hooks.registry import Hook, LevelHooks
from mp_fieldlog.level import Level
from mp_fieldlog.logger import Logger
from mp_fieldlog.protocol import LogFunction
from mp_fieldlog.sinks import Sink

std = Logger()


def standard_logger() -> Logger:
    """The default logger used by the module-level functions."""
    return std


def set_output(out: Sink) -> None:
    std.set_output(out)


def set_formatter(formatter: Formatter) -> None:
    std.set_formatter(formatter)


def set_report_caller(report_caller: bool) -> None:
    std.set_report_caller(report_caller)


def set_level(level: Level | str) -> None:
    std.set_level(level)


def get_level() -> Level:
    return std.get_level()


def is_level_enabled(level: Level) -> bool:
    return std.is_level_enabled(level)


def add_hook(hook: Hook) -> None:
    std.add_hook(hook)


def replace_hooks(hooks: LevelHooks) -> LevelHooks:
    return std.replace_hooks(hooks)


def with_error(err: BaseException) -> Entry:
    return std.with_error(err)


def with_field(key: str, value: Any) -> Entry:
    return std.with_field(key, value)


def with_fields(fields: Mapping[str, Any]) -> Entry:
    return std.with_fields(fields)


def with_time(time: datetime) -> Entry:
    return std.with_time(time)


def with_context(context: Any) -> Entry:
    return std.with_context(context)


# print-style

def trace(*args: Any) -> None:
    std.trace(*args)


def debug(*args: Any) -> None:
    std.debug(*args)


def print(*args: Any) -> None:  # noqa: A001
    std.print(*args)


def info(*args: Any) -> None:
    std.info(*args)


def warn(*args: Any) -> None:
    std.warn(*args)


def warning(*args: Any) -> None:
    std.warning(*args)


def error(*args: Any) -> None:
    std.error(*args)


def panic(*args: Any) -> None:
    std.panic(*args)


def fatal(*args: Any) -> None:
    std.fatal(*args)


# printf-style

def tracef(format: str, *args: Any) -> None:  # noqa: A002
    std.tracef(format, *args)


def debugf(format: str, *args: Any) -> None:  # noqa: A002
    std.debugf(format, *args)


def printf(format: str, *args: Any) -> None:  # noqa: A002
    std.printf(format, *args)


def infof(format: str, *args: Any) -> None:  # noqa: A002
    std.infof(format, *args)


def warnf(format: str, *args: Any) -> None:  # noqa: A002
    std.warnf(format, *args)


def warningf(format: str, *args: Any) -> None:  # noqa: A002
    std.warningf(format, *args)


def errorf(format: str, *args: Any) -> None:  # noqa: A002
    std.errorf(format, *args)


def panicf(format: str, *args: Any) -> None:  # noqa: A002
    std.panicf(format, *args)


def fatalf(format: str, *args: Any) -> None:  # noqa: A002
    std.fatalf(format, *args)


# println-style

def traceln(*args: Any) -> None:
    std.traceln(*args)


def debugln(*args: Any) -> None:
    std.debugln(*args)


def println(*args: Any) -> None:
    std.println(*args)


def infoln(*args: Any) -> None:
    std.infoln(*args)


def warnln(*args: Any) -> None:
    std.warnln(*args)


def warningln(*args: Any) -> None:
    std.warningln(*args)


def errorln(*args: Any) -> None:
    std.errorln(*args)


def panicln(*args: Any) -> None:
    std.panicln(*args)


def fatalln(*args: Any) -> None:
    std.fatalln(*args)


# lazy messages

def trace_fn(fn: LogFunction) -> None:
    std.trace_fn(fn)


def debug_fn(fn: LogFunction) -> None:
    std.debug_fn(fn)


def print_fn(fn: LogFunction) -> None:
    std.print_fn(fn)


def info_fn(fn: LogFunction) -> None:
    std.info_fn(fn)


def warn_fn(fn: LogFunction) -> None:
    std.warn_fn(fn)


def warning_fn(fn: LogFunction) -> None:
    std.warning_fn(fn)


def error_fn(fn: LogFunction) -> None:
    std.error_fn(fn)


def panic_fn(fn: LogFunction) -> None:
    std.panic_fn(fn)


def fatal_fn(fn: LogFunction) -> None:
    std.fatal_fn(fn)


__all__ = [
    "add_hook",
    "debug",
    "debug_fn",
    "debugf",
    "debugln",
    "error",
    "error_fn",
    "errorf",
    "errorln",
    "fatal",
    "fatal_fn",
    "fatalf",
    "fatalln",
    "get_level",
    "info",
    "info_fn",
    "infof",
    "infoln",
    "is_level_enabled",
    "panic",
    "panic_fn",
    "panicf",
    "panicln",
    "print",
    "print_fn",
    "printf",
    "println",
    "replace_hooks",
    "set_formatter",
    "set_level",
    "set_output",
    "set_report_caller",
    "standard_logger",
    "trace",
    "trace_fn",
    "tracef",
    "traceln",
    "warn",
    "warn_fn",
    "warnf",
    "warning",
    "warning_fn",
    "warningf",
    "warningln",
    "warnln",
    "with_context",
    "with_error",
    "with_field",
    "with_fields",
    "with_time",
]
