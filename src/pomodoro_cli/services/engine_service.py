"""Wires the focus engine to its production collaborators."""

from __future__ import annotations

from collections.abc import Callable

from pomodoro_cli.adapters.clock import SystemClock
from pomodoro_cli.adapters.memory import InMemoryKeyValueStore
from pomodoro_cli.adapters.notifications import (
    DesktopNotificationSink,
    NullNotificationSink,
)
from pomodoro_cli.adapters.sound import TerminalSoundSink
from pomodoro_cli.adapters.sqlite.kv_store import SqliteKeyValueStore
from pomodoro_cli.models.focus.engine import FocusEngine
from pomodoro_cli.repositories.repository import KeyValueStore, NotificationSink
from pomodoro_cli.services.config_service import ConfigService, get_config_service
from pomodoro_cli.utils.logger import get_logger

# Release hooks for stores and worker threads opened by get_engine()
_open_resources: list[Callable[[], None]] = []


def create_store(config_service: ConfigService, ephemeral: bool = False) -> KeyValueStore:
    """Open the configured key/value store, or a throwaway one."""
    if ephemeral:
        return InMemoryKeyValueStore()
    store = SqliteKeyValueStore(config_service.get_store_path())
    _open_resources.append(store.close)
    return store


def create_notification_sink(config_service: ConfigService) -> NotificationSink:
    """Desktop notifications if enabled in config, else a sink that never fires."""
    config = config_service.config
    if not config.notifications.enabled:
        return NullNotificationSink()
    sink = DesktopNotificationSink(enabled=True)
    _open_resources.append(sink.shutdown)
    return sink


def get_engine(
    config_service: ConfigService | None = None, ephemeral: bool = False
) -> FocusEngine:
    """Build a FocusEngine from the application configuration.

    Args:
        config_service: Defaults to the cached application service.
        ephemeral: Keep settings and history in memory only.
    """
    config_service = config_service or get_config_service()
    config = config_service.config
    store = create_store(config_service, ephemeral=ephemeral)

    get_logger().debug(
        "building engine (store=%s)",
        "memory" if ephemeral else config_service.get_store_path(),
    )
    return FocusEngine(
        store=store,
        clock=SystemClock(),
        notification_sink=create_notification_sink(config_service),
        sound_sink=TerminalSoundSink(enabled=config.sound.enabled),
    )


def close_engines() -> None:
    """Close every store and notification worker opened by get_engine()."""
    while _open_resources:
        release = _open_resources.pop()
        release()
