"""Config settings – Settings base class and DatabaseSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from inventory_db.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class DatabaseSettings(Settings):
    """Connection and behaviour settings for the data-access layer.

    Loaded from ``INVENTORY_DB_URL``, ``INVENTORY_DB_ECHO`` and so on by
    :class:`~inventory_db.config.settings.EnvSettingsLoader`.

    ``url``, ``echo`` and ``pool_size`` feed
    ``SqlAlchemySessionFactory.from_settings``; ``search_language`` feeds
    ``SqlAlchemyDAOBase.from_settings``; ``log_level`` feeds
    ``JsonLoggerFactory.from_settings``.
    """

    _prefix: ClassVar[str] = "INVENTORY_DB"

    url: str
    echo: bool = False
    pool_size: int = 5
    search_language: str = "english"
    log_level: str = "INFO"

    def _validate(self) -> None:
        if not self.url.strip():
            raise InvalidSettingValueError("url", self.url, "must not be empty")
        if self.pool_size < 1:
            raise InvalidSettingValueError("pool_size", self.pool_size, "must be >= 1")
        if not self.search_language.isidentifier():
            raise InvalidSettingValueError(
                "search_language", self.search_language, "must be a text search configuration name"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")


__all__ = ["DatabaseSettings", "Settings"]
