"""Integrations with the standard library ``logging`` module."""
from mp_fieldlog.integrations.logging_handler import FieldlogHandler, level_for_record

__all__ = ["FieldlogHandler", "level_for_record"]
