"""FieldlogHandler – route standard library ``logging`` records into a Logger.

Typical usage::

    import logging
    from mp_fieldlog import standard_logger
    from mp_fieldlog.integrations import FieldlogHandler

    logging.getLogger().addHandler(FieldlogHandler(standard_logger()))

Attributes passed through ``extra=`` become entry fields; ``exc_info``
becomes the ``error`` field. Records never trigger FATAL exit or PANIC
raising: ``CRITICAL`` maps to ``ERROR``.
"""
from __future__ import annotations

import logging
from typing import Any

from mp_fieldlog.entry import ERROR_KEY
from mp_fieldlog.level import Level
from mp_fieldlog.logger import Logger

# attributes every LogRecord carries; anything else came from ``extra``
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime", "taskName"}


def level_for_record(levelno: int) -> Level:
    if levelno >= logging.ERROR:
        return Level.ERROR
    if levelno >= logging.WARNING:
        return Level.WARN
    if levelno >= logging.INFO:
        return Level.INFO
    if levelno >= logging.DEBUG:
        return Level.DEBUG
    return Level.TRACE


class FieldlogHandler(logging.Handler):
    """A :class:`logging.Handler` that re-logs records on a fieldlog logger.

    Parameters
    ----------
    logger:
        Destination logger.
    include_logger_name:
        Add the stdlib logger name under ``logger_name``.
    level:
        Log level filter (same as any :class:`logging.Handler`).
    """

    def __init__(
        self,
        logger: Logger,
        include_logger_name: bool = True,
        level: int = logging.NOTSET,
    ) -> None:
        super().__init__(level)
        self._logger = logger
        self._include_logger_name = include_logger_name

    def emit(self, record: logging.LogRecord) -> None:
        # the library's own diagnostics would loop back into the failing path
        if record.name.partition(".")[0] == "mp_fieldlog":
            return
        try:
            level = level_for_record(record.levelno)
            if not self._logger.is_level_enabled(level):
                return
            fields = self.record_fields(record)
            self._logger.with_fields(fields).log(level, record.getMessage())
        except Exception:  # noqa: BLE001
            self.handleError(record)

    def record_fields(self, record: logging.LogRecord) -> dict[str, Any]:
        fields: dict[str, Any] = {
            key: value for key, value in vars(record).items() if key not in _RECORD_ATTRS
        }
        if self._include_logger_name:
            fields["logger_name"] = record.name
        if record.exc_info and record.exc_info[1] is not None:
            fields[ERROR_KEY] = record.exc_info[1]
        return fields


__all__ = ["FieldlogHandler", "level_for_record"]
