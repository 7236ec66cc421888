"""Config validation errors.

Each error names the environment variable it concerns (``setting_name``,
e.g. ``INVENTORY_DB_POOL_SIZE``) and, when raised by a loader, the settings
class being built.
"""
from __future__ import annotations

from typing import Any

from inventory_db.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or did not validate."""

    default_code = "config_error"
    context_attrs = ("setting_name", "settings_class")

    def __init__(
        self,
        message: str,
        *,
        setting_name: str | None = None,
        settings_class: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.setting_name = setting_name
        self.settings_class = settings_class


class MissingRequiredSettingError(ConfigError):
    """A setting without a default has no environment value."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, *, settings_class: str | None = None) -> None:
        message = f"Required setting '{setting_name}' is missing"
        if settings_class:
            message = f"{message} for {settings_class}"
        super().__init__(message, setting_name=setting_name, settings_class=settings_class)


class InvalidSettingValueError(ConfigError):
    """A setting is present but cannot be used (bad type, out of range)."""

    default_code = "invalid_setting_value"
    context_attrs = ConfigError.context_attrs + ("reason",)

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        settings_class: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            setting_name=setting_name,
            settings_class=settings_class,
            **kwargs,
        )
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
