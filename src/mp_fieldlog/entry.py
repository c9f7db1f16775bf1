"""Entry – one log event, intermediate or final.

An entry carries the fields added with ``with_field``/``with_fields``. It is
emitted when a terminal method (``info``, ``errorf``, ``warnln`` …) is called
on it. Builders always return a new entry, so a base entry can be shared
between threads and extended concurrently.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Any

from mp_fieldlog.caller import CallerFrame, get_caller
from mp_fieldlog.errors import PanicError
from mp_fieldlog.fields import Fields, merge_fields
from mp_fieldlog.level import Level
from mp_fieldlog.protocol import FieldLogger

if TYPE_CHECKING:
    from mp_fieldlog.logger import Logger

diag_logger = logging.getLogger(__name__)

#: Key used by :meth:`Entry.with_error`.
ERROR_KEY = "error"


class Entry(FieldLogger):
    """A log entry bound to a :class:`~mp_fieldlog.logger.Logger`.

    ``time`` and ``level`` are assigned when the entry is emitted, not when it
    is built (``with_time`` pins the time explicitly).
    """

    def __init__(
        self,
        logger: Logger,
        data: Fields | None = None,
        time: datetime | None = None,
        context: Any = None,
    ) -> None:
        self.logger = logger
        self.data: Fields = data if data is not None else {}
        self.time = time
        self.level: Level | None = None
        self.message = ""
        self.caller: CallerFrame | None = None
        self.context = context

    def __repr__(self) -> str:
        return (
            f"Entry(level={self.level!s}, message={self.message!r}, "
            f"data={self.data!r}, time={self.time!r})"
        )

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    def with_field(self, key: str, value: Any) -> Entry:
        """Return a new entry with one more field."""
        return self.with_fields({key: value})

    def with_fields(self, fields: Mapping[str, Any]) -> Entry:
        """Return a new entry holding this entry's fields overlaid with *fields*."""
        return Entry(self.logger, merge_fields(self.data, fields), self.time, self.context)

    def with_error(self, err: BaseException) -> Entry:
        """Return a new entry with *err* under :data:`ERROR_KEY`."""
        return self.with_field(ERROR_KEY, err)

    def with_time(self, time: datetime) -> Entry:
        """Return a new entry whose timestamp is pinned to *time*."""
        return Entry(self.logger, dict(self.data), time, self.context)

    def with_context(self, context: Any) -> Entry:
        """Return a new entry carrying *context* for hooks to inspect."""
        return Entry(self.logger, dict(self.data), self.time, context)

    def dup(self) -> Entry:
        return Entry(self.logger, dict(self.data), self.time, self.context)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> bytes:
        """Render through the logger's current formatter."""
        return self.logger.formatter.format(self)

    def render_text(self) -> str:
        return self.render().decode("utf-8")

    def has_caller(self) -> bool:
        return self.logger.report_caller and self.caller is not None

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _owner(self) -> Logger:
        return self.logger

    def _emit(self, level: Level, message: str) -> None:
        self._log(level, message)

    def _log(self, level: Level, message: str) -> None:
        owner = self.logger
        entry = self.dup()
        if entry.time is None:
            entry.time = owner.clock.now()
        entry.level = level
        entry.message = message

        if owner.report_caller:
            entry.caller = get_caller()

        entry._fire_hooks()
        entry._write()

        if level <= Level.FATAL:
            if level == Level.FATAL:
                owner.exit(1)
            else:
                raise PanicError(entry)

    def _fire_hooks(self) -> None:
        owner = self.logger
        hooks = owner.hooks
        if not len(hooks):
            return
        try:
            hooks.fire(self.level, self, fire_all=owner.fire_all_hooks)  # type: ignore[arg-type]
        except Exception as exc:  # noqa: BLE001
            diag_logger.error("hook.failed level=%s error=%s", self.level, exc)

    def _write(self) -> None:
        owner = self.logger
        # snapshot under the lock, format outside it: a formatter may log
        formatter, out = owner.snapshot_output()
        try:
            serialized = formatter.format(self)
        except Exception as exc:  # noqa: BLE001
            diag_logger.error("formatter.failed level=%s error=%s", self.level, exc)
            return
        with owner.mu:
            try:
                out.write(serialized)
            except Exception as exc:  # noqa: BLE001
                diag_logger.error("sink.write_failed level=%s error=%s", self.level, exc)


__all__ = ["ERROR_KEY", "Entry"]
