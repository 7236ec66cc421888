"""Config – 12-factor settings and loaders."""

from inventory_db.config.settings import DatabaseSettings, EnvSettingsLoader, Settings, SettingsLoader
from inventory_db.config.validation import ConfigError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DatabaseSettings",
    "EnvSettingsLoader",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
