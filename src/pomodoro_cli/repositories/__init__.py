"""Collaborator interfaces (ports) for the focus engine."""

from pomodoro_cli.repositories.repository import (
    Clock,
    KeyValueStore,
    NotificationSink,
    PermissionCallback,
    SoundSink,
)

__all__ = [
    "Clock",
    "KeyValueStore",
    "NotificationSink",
    "PermissionCallback",
    "SoundSink",
]
