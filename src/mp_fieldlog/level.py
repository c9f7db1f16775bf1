"""Severity scale.

Levels are ordered from most to least severe and encoded so that smaller
means more severe. A logger with threshold ``T`` emits a call at level ``L``
iff ``T >= L``.
"""

from __future__ import annotations

from enum import IntEnum

from mp_fieldlog.errors import InvalidLevelError


class Level(IntEnum):
    """Logging severity."""

    PANIC = 0
    FATAL = 1
    ERROR = 2
    WARN = 3
    INFO = 4
    DEBUG = 5
    TRACE = 6

    def __str__(self) -> str:
        return _NAMES[self]

    def __format__(self, format_spec: str) -> str:
        return format(_NAMES[self], format_spec)

    @classmethod
    def parse(cls, text: str | int | Level) -> Level:
        """Return the level named by *text* (case-insensitive).

        Integers are accepted by value. Raises :class:`InvalidLevelError` for
        unknown names and out-of-range numbers.
        """
        if isinstance(text, Level):
            return text
        if isinstance(text, int) and not isinstance(text, bool):
            try:
                return cls(text)
            except ValueError:
                raise InvalidLevelError(text) from None
        try:
            return _BY_NAME[text.strip().lower()]
        except (KeyError, AttributeError):
            raise InvalidLevelError(text) from None

    def enables(self, level: Level) -> bool:
        """``True`` when a threshold of ``self`` lets *level* through."""
        return self >= level


_NAMES: dict[Level, str] = {
    Level.PANIC: "panic",
    Level.FATAL: "fatal",
    Level.ERROR: "error",
    Level.WARN: "warning",
    Level.INFO: "info",
    Level.DEBUG: "debug",
    Level.TRACE: "trace",
}

_BY_NAME: dict[str, Level] = {name: level for level, name in _NAMES.items()}
_BY_NAME["warn"] = Level.WARN

ALL_LEVELS: tuple[Level, ...] = tuple(Level)


def parse_level(text: str) -> Level:
    """Shorthand for :meth:`Level.parse`."""
    return Level.parse(text)


__all__ = ["ALL_LEVELS", "Level", "parse_level"]
