"""Configuration – dataclass settings loaded from the environment."""
from mp_fieldlog.config.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from mp_fieldlog.config.settings import FORMATTERS, LoggerSettings, Settings, configure

__all__ = [
    "FORMATTERS",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "LoggerSettings",
    "Settings",
    "SettingsLoader",
    "configure",
]
