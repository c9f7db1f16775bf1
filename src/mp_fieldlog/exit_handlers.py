"""Process-exit indirection for FATAL log calls.

Handlers registered with :func:`register_exit_handler` run in registration
order. Handlers added with :func:`defer_exit_handler` run before those, last
deferred first, matching scoped-cleanup expectations. A failing handler is
reported and never stops the handlers after it.

Typical usage::

    from mp_fieldlog import exit_handlers

    exit_handlers.register_exit_handler(flush_metrics)
    exit_handlers.defer_exit_handler(db.close)
"""
from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Callable
from typing import NoReturn

logger = logging.getLogger(__name__)

ExitHandler = Callable[[], object]

_lock = threading.Lock()
_handlers: list[ExitHandler] = []


def register_exit_handler(handler: ExitHandler) -> None:
    """Append *handler*; it runs after every earlier registered handler."""
    with _lock:
        _handlers.append(handler)


def defer_exit_handler(handler: ExitHandler) -> None:
    """Prepend *handler*; it runs before every handler already present."""
    with _lock:
        _handlers.insert(0, handler)


def handlers() -> list[ExitHandler]:
    """Snapshot of the handlers in the order they will run."""
    with _lock:
        return list(_handlers)


def clear_exit_handlers() -> None:
    with _lock:
        _handlers.clear()


def run_exit_handlers() -> None:
    """Run every handler, each isolated from the failures of the others."""
    for handler in handlers():
        try:
            handler()
        except Exception as exc:  # noqa: BLE001
            logger.error("exit_handler.failed handler=%r error=%s", handler, exc)


def exit(code: int) -> NoReturn:  # noqa: A001
    """Run all exit handlers, then terminate with *code*."""
    run_exit_handlers()
    sys.exit(code)


__all__ = [
    "ExitHandler",
    "clear_exit_handlers",
    "defer_exit_handler",
    "exit",
    "handlers",
    "register_exit_handler",
    "run_exit_handlers",
]
