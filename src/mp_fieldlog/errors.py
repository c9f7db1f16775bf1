"""Error hierarchy for mp-fieldlog.

Hierarchy::

    BaseError
    ├── FieldlogError
    │   ├── InvalidLevelError     (also a ValueError)
    │   └── PanicError            (raised by PANIC-level log calls)
    └── ConfigError
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mp_fieldlog.entry import Entry
    from mp_fieldlog.level import Level


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Arbitrary extra context (serialisable dict).
        cause: Original exception that triggered this error.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """Return a JSON-serialisable single-line string representation."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging)."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


class FieldlogError(BaseError):
    """Base class for errors raised by the logging core."""

    default_code = "fieldlog_error"


class InvalidLevelError(FieldlogError, ValueError):
    """A severity name could not be parsed."""

    default_code = "invalid_level"

    def __init__(self, value: object) -> None:
        super().__init__(f"not a valid level: {value!r}", detail={"value": repr(value)})
        self.value = value


class PanicError(FieldlogError):
    """Raised after a PANIC-level entry has been written.

    The fully populated :class:`~mp_fieldlog.entry.Entry` travels with the
    exception so recovering code can branch on its level, message and data.
    """

    default_code = "panic"

    def __init__(self, entry: Entry) -> None:
        super().__init__(entry.message, detail=dict(entry.data))
        self.entry = entry

    @property
    def level(self) -> Level | None:
        return self.entry.level

    @property
    def data(self) -> dict[str, Any]:
        return self.entry.data


class ConfigError(BaseError):
    """Raised when configuration is invalid or loading failed."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = [
    "BaseError",
    "ConfigError",
    "FieldlogError",
    "InvalidLevelError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "PanicError",
]
