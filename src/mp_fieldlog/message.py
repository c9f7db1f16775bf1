"""Message construction for the print, printf and println conventions.

None of these raise: an operand whose ``__str__`` fails is rendered as a
``%!v(PANIC=…)`` marker instead.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _panic_marker(method: str, exc: BaseException) -> str:
    try:
        detail = f"{type(exc).__name__}: {exc}"
    except Exception:  # noqa: BLE001
        detail = type(exc).__name__
    return f"%!v(PANIC={method} method: {detail})"


def safe_str(arg: Any) -> str:
    """``str(arg)``, or a ``%!v(PANIC=…)`` marker when ``__str__`` raises."""
    if isinstance(arg, str):
        return arg
    try:
        return str(arg)
    except Exception as exc:  # noqa: BLE001
        return _panic_marker("__str__", exc)


def safe_repr(arg: Any) -> str:
    try:
        return repr(arg)
    except Exception as exc:  # noqa: BLE001
        return _panic_marker("__repr__", exc)


def sprint(*args: Any) -> str:
    """Concatenate *args*, adding a space only between two non-string operands.

    ``sprint("a", 1, 2, "b") == "a1 2b"``
    """
    parts: list[str] = []
    prev_is_str = True
    for i, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if i > 0 and not is_str and not prev_is_str:
            parts.append(" ")
        parts.append(safe_str(arg))
        prev_is_str = is_str
    return "".join(parts)


def sprintf(format: str, *args: Any) -> str:  # noqa: A002
    """Apply ``%``-interpolation; never raises.

    With no arguments the format is returned verbatim. A single non-empty
    mapping argument is used for named substitution, as :mod:`logging` does.
    """
    if not args:
        return format
    values: Any = args
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values = args[0]
    try:
        return format % values
    except Exception as exc:  # noqa: BLE001
        reason = f"{type(exc).__name__}: {safe_str(exc)}"
        rendered = ", ".join(safe_repr(arg) for arg in args)
        return f"{format}%!(BADFORMAT {reason}; args=({rendered}))"


def sprintln(*args: Any) -> str:
    """Space-join every argument, without a trailing newline.

    Exactly one trailing ``\\n`` is removed, so ``sprintln("x\\n")`` gives
    ``"x"`` and ``sprintln("x\\n\\n")`` gives ``"x\\n"``.
    """
    msg = " ".join(safe_str(arg) for arg in args)
    return msg[:-1] if msg.endswith("\n") else msg


__all__ = ["safe_repr", "safe_str", "sprint", "sprintf", "sprintln"]
