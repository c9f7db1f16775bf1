"""Config settings – Settings base class and LoggerSettings."""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, ClassVar

from mp_fieldlog.errors import InvalidLevelError, InvalidSettingValueError
from mp_fieldlog.formatters.base import Formatter
from mp_fieldlog.formatters.json_formatter import JSONFormatter
from mp_fieldlog.formatters.text_formatter import TextFormatter
from mp_fieldlog.level import Level

if TYPE_CHECKING:
    from mp_fieldlog.logger import Logger

FORMATTERS = ("text", "json")


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class LoggerSettings(Settings):
    """Logger configuration, loadable from ``FIELDLOG_*`` environment variables."""

    _prefix: ClassVar[str] = "FIELDLOG"

    level: str = "info"
    formatter: str = "text"
    report_caller: bool = False
    force_colors: bool = False
    disable_colors: bool = False
    full_timestamp: bool = False
    timestamp_format: str = ""

    def _validate(self) -> None:
        try:
            Level.parse(self.level)
        except InvalidLevelError:
            raise InvalidSettingValueError("level", self.level, "unknown level name") from None
        if self.formatter.lower() not in FORMATTERS:
            raise InvalidSettingValueError(
                "formatter", self.formatter, f"expected one of {', '.join(FORMATTERS)}"
            )
        if self.force_colors and self.disable_colors:
            raise InvalidSettingValueError(
                "force_colors", self.force_colors, "conflicts with disable_colors"
            )

    @property
    def parsed_level(self) -> Level:
        return Level.parse(self.level)

    def build_formatter(self) -> Formatter:
        timestamp_format = self.timestamp_format or None
        if self.formatter.lower() == "json":
            return JSONFormatter(timestamp_format=timestamp_format)
        return TextFormatter(
            force_colors=self.force_colors,
            disable_colors=self.disable_colors,
            full_timestamp=self.full_timestamp,
            timestamp_format=timestamp_format,
        )


def configure(logger: Logger, settings: LoggerSettings) -> Logger:
    """Apply *settings* to *logger* through its public setters."""
    logger.set_level(settings.parsed_level)
    logger.set_formatter(settings.build_formatter())
    logger.set_report_caller(settings.report_caller)
    return logger


__all__ = ["FORMATTERS", "LoggerSettings", "Settings", "configure"]
