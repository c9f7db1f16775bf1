"""Hooks – per-level side effects fired before an entry is formatted."""
from mp_fieldlog.hooks.context import ContextVarsHook
from mp_fieldlog.hooks.defaults import DefaultFieldsHook
from mp_fieldlog.hooks.redaction import DEFAULT_SENSITIVE_FIELDS, RedactionHook
from mp_fieldlog.hooks.registry import Hook, LevelHooks
from mp_fieldlog.hooks.stdlib import StdlibLoggingHook
from mp_fieldlog.hooks.writer import WriterHook

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "ContextVarsHook",
    "DefaultFieldsHook",
    "Hook",
    "LevelHooks",
    "RedactionHook",
    "StdlibLoggingHook",
    "WriterHook",
]
