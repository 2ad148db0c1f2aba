"""Concrete collaborators for the focus engine."""

from pomodoro_cli.adapters.clock import SystemClock
from pomodoro_cli.adapters.memory import InMemoryKeyValueStore
from pomodoro_cli.adapters.notifications import (
    DesktopNotificationSink,
    NullNotificationSink,
)
from pomodoro_cli.adapters.sound import TerminalSoundSink
from pomodoro_cli.adapters.sqlite import SqliteKeyValueStore

__all__ = [
    "DesktopNotificationSink",
    "InMemoryKeyValueStore",
    "NullNotificationSink",
    "SqliteKeyValueStore",
    "SystemClock",
    "TerminalSoundSink",
]
