"""Formatters – text, JSON and structlog-backed renderers."""
from mp_fieldlog.formatters.base import CallerPrettyfier, Formatter, format_timestamp
from mp_fieldlog.formatters.json_formatter import JSONFormatter
from mp_fieldlog.formatters.structlog_formatter import StructlogFormatter
from mp_fieldlog.formatters.text_formatter import TextFormatter

__all__ = [
    "CallerPrettyfier",
    "Formatter",
    "JSONFormatter",
    "StructlogFormatter",
    "TextFormatter",
    "format_timestamp",
]
