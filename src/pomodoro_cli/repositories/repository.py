"""Collaborator interfaces for the focus engine.

This module defines the abstract base classes (ports) the timer core talks to,
following the hexagonal architecture (Ports & Adapters) pattern. Concrete
adapters live in ``pomodoro_cli.adapters`` and are injected by the caller, so
the engine itself never touches the clock, the disk, the speaker or the
desktop directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from concurrent.futures import Future
from datetime import datetime

from pomodoro_cli.models.focus.sounds import SoundOption

PermissionCallback = Callable[[bool], None]


class Clock(ABC):
    """Source of the current time and calendar arithmetic."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant as a timezone-aware datetime."""
        raise NotImplementedError("Clock.now() must be implemented by adapter")

    @abstractmethod
    def start_of_day(self, moment: datetime) -> datetime:
        """Return midnight of the calendar day containing ``moment``."""
        raise NotImplementedError(
            "Clock.start_of_day() must be implemented by adapter"
        )

    @abstractmethod
    def add_days(self, moment: datetime, days: int) -> datetime:
        """Return ``moment`` shifted by ``days`` calendar days (may be negative)."""
        raise NotImplementedError("Clock.add_days() must be implemented by adapter")


class KeyValueStore(ABC):
    """Durable scalar and blob storage.

    Absent keys return ``None``; they are not errors.
    """

    @abstractmethod
    def get_int(self, key: str) -> int | None:
        """Return the integer stored under ``key``, or None."""
        raise NotImplementedError(
            "KeyValueStore.get_int() must be implemented by adapter"
        )

    @abstractmethod
    def set_int(self, key: str, value: int) -> None:
        """Store an integer under ``key``, replacing any previous value."""
        raise NotImplementedError(
            "KeyValueStore.set_int() must be implemented by adapter"
        )

    @abstractmethod
    def get_blob(self, key: str) -> bytes | None:
        """Return the bytes stored under ``key``, or None."""
        raise NotImplementedError(
            "KeyValueStore.get_blob() must be implemented by adapter"
        )

    @abstractmethod
    def set_blob(self, key: str, data: bytes) -> None:
        """Store bytes under ``key``, replacing any previous value."""
        raise NotImplementedError(
            "KeyValueStore.set_blob() must be implemented by adapter"
        )

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete ``key``. Removing a missing key is a no-op."""
        raise NotImplementedError(
            "KeyValueStore.remove() must be implemented by adapter"
        )


class NotificationSink(ABC):
    """Desktop notification delivery.

    Permission queries answer through a callback which may run on another
    thread; the engine applies the result under its own lock. Adapters that
    answer asynchronously return the Future of the answer so callers can wait.
    """

    @abstractmethod
    def request_permission(self, callback: PermissionCallback) -> Future | None:
        """Ask for permission to notify and report the answer to ``callback``."""
        raise NotImplementedError(
            "NotificationSink.request_permission() must be implemented by adapter"
        )

    @abstractmethod
    def check_permission(self, callback: PermissionCallback) -> Future | None:
        """Report the current permission state to ``callback``."""
        raise NotImplementedError(
            "NotificationSink.check_permission() must be implemented by adapter"
        )

    @abstractmethod
    def send(self, title: str, body: str) -> None:
        """Deliver a notification. Fire and forget."""
        raise NotImplementedError(
            "NotificationSink.send() must be implemented by adapter"
        )

    @abstractmethod
    def cancel_all(self) -> None:
        """Withdraw any pending notifications."""
        raise NotImplementedError(
            "NotificationSink.cancel_all() must be implemented by adapter"
        )


class SoundSink(ABC):
    """Plays the completion chime and sound previews."""

    @property
    @abstractmethod
    def selected_sound(self) -> SoundOption:
        """The sound played on completion."""
        raise NotImplementedError

    @selected_sound.setter
    @abstractmethod
    def selected_sound(self, sound: SoundOption) -> None:
        raise NotImplementedError

    @abstractmethod
    def play_completion(self) -> None:
        """Play the selected sound."""
        raise NotImplementedError(
            "SoundSink.play_completion() must be implemented by adapter"
        )

    @abstractmethod
    def play_preview(self, sound: SoundOption) -> None:
        """Play ``sound`` once without changing the selection."""
        raise NotImplementedError(
            "SoundSink.play_preview() must be implemented by adapter"
        )
