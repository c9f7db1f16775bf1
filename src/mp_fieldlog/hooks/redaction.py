"""RedactionHook – replace values of sensitive keys with ``[REDACTED]``."""
from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from mp_fieldlog.level import ALL_LEVELS, Level

if TYPE_CHECKING:
    from mp_fieldlog.entry import Entry

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "secret", "token", "api_key", "apikey",
    "authorization", "credit_card", "card_number", "cvv", "ssn",
})


class RedactionHook:
    """Redacts sensitive fields, recursing into nested dicts.

    Key matching is case-insensitive. Nested dicts are copied, never modified,
    so values shared with the caller stay intact.
    """

    REDACTED = "[REDACTED]"

    def __init__(
        self,
        sensitive_fields: frozenset[str] | None = None,
        levels: Iterable[Level] = ALL_LEVELS,
    ) -> None:
        fields = sensitive_fields or DEFAULT_SENSITIVE_FIELDS
        self._fields = frozenset(f.lower() for f in fields)
        self._levels = tuple(levels)

    def levels(self) -> tuple[Level, ...]:
        return self._levels

    def fire(self, entry: Entry) -> None:
        entry.data = self.redact_deep(entry.data)

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: (self.REDACTED if k.lower() in self._fields else v) for k, v in data.items()}

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        """Recursively redact nested dicts."""
        result: dict[str, Any] = {}
        for k, v in data.items():
            if k.lower() in self._fields:
                result[k] = self.REDACTED
            elif isinstance(v, dict):
                result[k] = self.redact_deep(v)
            else:
                result[k] = v
        return result


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "RedactionHook"]
