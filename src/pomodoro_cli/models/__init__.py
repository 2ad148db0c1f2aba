"""Data models for Pomodoro CLI."""

from .config_models import (
    AppConfig,
    LoggingConfig,
    NotificationConfig,
    SoundConfig,
    StorageConfig,
    UIConfig,
)

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "NotificationConfig",
    "SoundConfig",
    "StorageConfig",
    "UIConfig",
]
