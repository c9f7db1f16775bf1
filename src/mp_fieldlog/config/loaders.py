"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Mapping
from typing import Any, TypeVar, get_type_hints

from mp_fieldlog.config.settings import Settings
from mp_fieldlog.errors import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    A field ``level`` on a class with ``_prefix = "FIELDLOG"`` is read from
    ``FIELDLOG_LEVEL``.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = self._environ if self._environ is not None else os.environ
        prefix = getattr(settings_class, "_prefix", "").upper()
        kwargs: dict[str, Any] = {}
        # resolves string annotations left by ``from __future__ import annotations``
        hints = get_type_hints(settings_class)

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = environ.get(env_key)

            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(env_key)
                continue

            kwargs[field.name] = self._coerce(raw, hints.get(field.name, field.type))

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc

    def _coerce(self, value: str, type_hint: Any) -> Any:  # noqa: PLR0911
        origin = getattr(type_hint, "__origin__", None)
        if type_hint is bool or type_hint == "bool":
            return value.lower() in ("1", "true", "yes", "on")
        if type_hint is int or type_hint == "int":
            return int(value)
        if type_hint is float or type_hint == "float":
            return float(value)
        if origin is list:
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


class DotenvSettingsLoader(SettingsLoader):
    """Load settings from a ``.env`` file then fall back to ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        try:
            from dotenv import load_dotenv  # type: ignore[import-untyped]
        except ImportError as exc:
            raise ImportError("Install 'python-dotenv' to use DotenvSettingsLoader") from exc
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
