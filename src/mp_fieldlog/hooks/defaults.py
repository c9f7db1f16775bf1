"""DefaultFieldsHook – fields present on every entry unless set by the caller."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from mp_fieldlog.level import ALL_LEVELS, Level

if TYPE_CHECKING:
    from mp_fieldlog.entry import Entry


class DefaultFieldsHook:
    """Adds default fields (service name, host, version …) to each entry.

    Fields already present on the entry win over defaults.
    """

    def __init__(
        self,
        fields: Mapping[str, Any] | None = None,
        levels: Iterable[Level] = ALL_LEVELS,
    ) -> None:
        self._fields: dict[str, Any] = dict(fields or {})
        self._levels = tuple(levels)

    def add_default_field(self, key: str, value: Any) -> None:
        # replace rather than mutate: fire() may be iterating the old dict
        self._fields = {**self._fields, key: value}

    @property
    def fields(self) -> dict[str, Any]:
        return dict(self._fields)

    def levels(self) -> tuple[Level, ...]:
        return self._levels

    def fire(self, entry: Entry) -> None:
        for key, value in self._fields.items():
            entry.data.setdefault(key, value)


__all__ = ["DefaultFieldsHook"]
