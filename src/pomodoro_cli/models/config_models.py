"""Application configuration models.

These cover how the CLI runs (where data lives, whether it may make noise).
Timer durations are not part of this file: they are user settings kept in the
key/value store next to the session history.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator


class StorageConfig(BaseModel):
    """Storage configuration."""

    path: str | None = Field(
        default=None, description="SQLite file path (defaults to the user data dir)"
    )


class NotificationConfig(BaseModel):
    """Desktop notification configuration."""

    enabled: bool = Field(default=True)


class SoundConfig(BaseModel):
    """Sound configuration."""

    enabled: bool = Field(default=True)


class UIConfig(BaseModel):
    """UI configuration."""

    refresh_per_second: int = Field(default=4, ge=1, le=30)
    fullscreen: bool = Field(default=False)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Accept only level names known to the logging module."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level


class AppConfig(BaseModel):
    """Main Pomodoro CLI configuration"""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    notifications: NotificationConfig = Field(default_factory=NotificationConfig)
    sound: SoundConfig = Field(default_factory=SoundConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
