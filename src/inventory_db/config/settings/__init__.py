"""Config settings – 12-factor env-based configuration."""
from inventory_db.config.settings.base import DatabaseSettings, Settings
from inventory_db.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DatabaseSettings", "DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
