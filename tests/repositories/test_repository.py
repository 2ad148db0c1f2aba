"""Unit tests for the abstract collaborator interfaces in repository.py.

Tests the `raise NotImplementedError` bodies of each abstract method by creating
concrete subclasses that delegate straight back to `super()`.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from pomodoro_cli.repositories.repository import (
    Clock,
    KeyValueStore,
    NotificationSink,
    SoundSink,
)

NOW = datetime(2024, 3, 15, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Concrete pass-through implementations
# ---------------------------------------------------------------------------


class _Clock(Clock):
    def now(self):
        return super().now()

    def start_of_day(self, moment):
        return super().start_of_day(moment)

    def add_days(self, moment, days):
        return super().add_days(moment, days)


class _Store(KeyValueStore):
    def get_int(self, key):
        return super().get_int(key)

    def set_int(self, key, value):
        return super().set_int(key, value)

    def get_blob(self, key):
        return super().get_blob(key)

    def set_blob(self, key, data):
        return super().set_blob(key, data)

    def remove(self, key):
        return super().remove(key)


class _Notifications(NotificationSink):
    def request_permission(self, callback):
        return super().request_permission(callback)

    def check_permission(self, callback):
        return super().check_permission(callback)

    def send(self, title, body):
        return super().send(title, body)

    def cancel_all(self):
        return super().cancel_all()


class _Sound(SoundSink):
    @property
    def selected_sound(self):
        return "none"

    @selected_sound.setter
    def selected_sound(self, sound):
        pass

    def play_completion(self):
        return super().play_completion()

    def play_preview(self, sound):
        return super().play_preview(sound)


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("cls", [Clock, KeyValueStore, NotificationSink, SoundSink])
def test_cannot_instantiate_interface(cls):
    with pytest.raises(TypeError):
        cls()


@pytest.mark.parametrize(
    "call,name",
    [
        (lambda c: c.now(), "Clock.now()"),
        (lambda c: c.start_of_day(NOW), "Clock.start_of_day()"),
        (lambda c: c.add_days(NOW, 1), "Clock.add_days()"),
    ],
)
def test_clock_methods(call, name):
    with pytest.raises(NotImplementedError, match=name.replace("(", r"\(").replace(")", r"\)")):
        call(_Clock())


@pytest.mark.parametrize(
    "call",
    [
        lambda s: s.get_int("k"),
        lambda s: s.set_int("k", 1),
        lambda s: s.get_blob("k"),
        lambda s: s.set_blob("k", b""),
        lambda s: s.remove("k"),
    ],
)
def test_store_methods(call):
    with pytest.raises(NotImplementedError, match="must be implemented by adapter"):
        call(_Store())


@pytest.mark.parametrize(
    "call",
    [
        lambda n: n.request_permission(print),
        lambda n: n.check_permission(print),
        lambda n: n.send("t", "b"),
        lambda n: n.cancel_all(),
    ],
)
def test_notification_methods(call):
    with pytest.raises(NotImplementedError, match="NotificationSink"):
        call(_Notifications())


@pytest.mark.parametrize(
    "call", [lambda s: s.play_completion(), lambda s: s.play_preview("bell")]
)
def test_sound_methods(call):
    with pytest.raises(NotImplementedError, match="SoundSink"):
        call(_Sound())
