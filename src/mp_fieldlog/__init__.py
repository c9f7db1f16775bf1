"""
mp_fieldlog – structured, leveled logging with hooks.

Import path convention::

    import mp_fieldlog as log

    log.with_fields({"user": "alice"}).info("signed in")

    from mp_fieldlog import Logger, Level, JSONFormatter
    from mp_fieldlog.hooks import WriterHook
    from mp_fieldlog.testing import new_null_logger
"""

from mp_fieldlog.caller import CallerFrame
from mp_fieldlog.clock import Clock, FrozenClock, SystemClock
from mp_fieldlog.entry import ERROR_KEY, Entry
from mp_fieldlog.errors import (
    BaseError,
    ConfigError,
    FieldlogError,
    InvalidLevelError,
    PanicError,
)
from mp_fieldlog.exit_handlers import defer_exit_handler, register_exit_handler
from mp_fieldlog.exported import (
    add_hook,
    debug,
    debug_fn,
    debugf,
    debugln,
    error,
    error_fn,
    errorf,
    errorln,
    fatal,
    fatal_fn,
    fatalf,
    fatalln,
    get_level,
    info,
    info_fn,
    infof,
    infoln,
    is_level_enabled,
    panic,
    panic_fn,
    panicf,
    panicln,
    print,
    print_fn,
    printf,
    println,
    replace_hooks,
    set_formatter,
    set_level,
    set_output,
    set_report_caller,
    standard_logger,
    trace,
    trace_fn,
    tracef,
    traceln,
    warn,
    warn_fn,
    warnf,
    warning,
    warning_fn,
    warningf,
    warningln,
    warnln,
    with_context,
    with_error,
    with_field,
    with_fields,
    with_time,
)
from mp_fieldlog.fields import FieldMap, Fields, merge_fields
from mp_fieldlog.formatters import Formatter, JSONFormatter, StructlogFormatter, TextFormatter
from mp_fieldlog.hooks import Hook, LevelHooks
from mp_fieldlog.level import ALL_LEVELS, Level, parse_level
from mp_fieldlog.logger import Logger
from mp_fieldlog.protocol import FieldLogger

__version__ = "0.1.0"

# ``print`` and ``print_fn`` stay importable by name but are kept out of
# ``__all__`` so star-imports never shadow the builtin.
__all__ = [
    "ALL_LEVELS",
    "ERROR_KEY",
    "BaseError",
    "CallerFrame",
    "Clock",
    "ConfigError",
    "Entry",
    "FieldLogger",
    "FieldMap",
    "FieldlogError",
    "Fields",
    "Formatter",
    "FrozenClock",
    "Hook",
    "InvalidLevelError",
    "JSONFormatter",
    "Level",
    "LevelHooks",
    "Logger",
    "PanicError",
    "StructlogFormatter",
    "SystemClock",
    "TextFormatter",
    "__version__",
    "add_hook",
    "debug",
    "debug_fn",
    "debugf",
    "debugln",
    "defer_exit_handler",
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
    "merge_fields",
    "panic",
    "panic_fn",
    "panicf",
    "panicln",
    "parse_level",
    "printf",
    "println",
    "register_exit_handler",
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
