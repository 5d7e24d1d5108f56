"""Module de configuration."""

from ini_store.config.loader import (
    ConfigLoader,
    FileConfigLoader,
    load_settings
)
from ini_store.config.settings import LoggingSettings, StoreSettings

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "load_settings",
    "LoggingSettings",
    "StoreSettings"
]
