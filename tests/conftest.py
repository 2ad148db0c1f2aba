"""Shared test fixtures and configuration.

Provides in-memory stand-ins for every engine collaborator so tests never
touch the real clock, disk, speakers or desktop.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from pomodoro_cli.adapters.memory import InMemoryKeyValueStore
from pomodoro_cli.models.focus.engine import FocusEngine
from pomodoro_cli.models.focus.sounds import DEFAULT_SOUND
from pomodoro_cli.repositories.repository import Clock, NotificationSink, SoundSink


# ---------------------------------------------------------------------------
# Fake collaborators
# ---------------------------------------------------------------------------


class FixedClock(Clock):
    """Clock frozen at ``now`` (UTC) until a test moves it."""

    def __init__(self, now: datetime | None = None):
        self.current = now or datetime(2024, 3, 15, 14, 30, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self.current

    def start_of_day(self, moment: datetime) -> datetime:
        return moment.replace(hour=0, minute=0, second=0, microsecond=0)

    def add_days(self, moment: datetime, days: int) -> datetime:
        return moment + timedelta(days=days)

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


class RecordingNotificationSink(NotificationSink):
    """Answers permission synchronously and records everything sent."""

    def __init__(self, granted: bool = False):
        self.granted = granted
        self.request_calls = 0
        self.check_calls = 0
        self.sent: list[tuple[str, str]] = []
        self.cancel_calls = 0
        self.fail_on_send = False

    def request_permission(self, callback) -> None:
        self.request_calls += 1
        callback(self.granted)

    def check_permission(self, callback) -> None:
        self.check_calls += 1
        callback(self.granted)

    def send(self, title: str, body: str) -> None:
        if self.fail_on_send:
            raise OSError("notification daemon gone")
        self.sent.append((title, body))

    def cancel_all(self) -> None:
        self.cancel_calls += 1


class RecordingSoundSink(SoundSink):
    """Records completion plays and previews."""

    def __init__(self):
        self._selected = DEFAULT_SOUND
        self.completion_plays = 0
        self.previews: list[str] = []
        self.fail_on_play = False

    @property
    def selected_sound(self):
        return self._selected

    @selected_sound.setter
    def selected_sound(self, sound) -> None:
        self._selected = sound

    def play_completion(self) -> None:
        if self.fail_on_play:
            raise OSError("no audio device")
        self.completion_plays += 1

    def play_preview(self, sound) -> None:
        self.previews.append(sound)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture()
def notifications() -> RecordingNotificationSink:
    return RecordingNotificationSink()


@pytest.fixture()
def sound() -> RecordingSoundSink:
    return RecordingSoundSink()


@pytest.fixture()
def engine(store, clock, notifications, sound) -> FocusEngine:
    return FocusEngine(
        store=store,
        clock=clock,
        notification_sink=notifications,
        sound_sink=sound,
    )


@pytest.fixture()
def make_engine(store, clock, notifications, sound):
    """Build extra engines over the same collaborators (e.g. to test reloads)."""

    def _make(**overrides) -> FocusEngine:
        kwargs = {
            "store": store,
            "clock": clock,
            "notification_sink": notifications,
            "sound_sink": sound,
        }
        kwargs.update(overrides)
        return FocusEngine(**kwargs)

    return _make


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory.

    Patches platform dirs so config/data files land in *tmp_path* only.
    Also clears the lru_cache so each test gets a fresh service instance.
    """
    from pomodoro_cli.services.config_service import get_config_service

    tmpdir = str(tmp_path)
    get_config_service.cache_clear()
    with patch("pomodoro_cli.services.config_service.user_config_dir", return_value=tmpdir):
        with patch("pomodoro_cli.services.config_service.user_data_dir", return_value=tmpdir):
            from pomodoro_cli.services.config_service import ConfigService

            svc = ConfigService()
            yield svc
    get_config_service.cache_clear()


@pytest.fixture(autouse=True)
def isolate_log_dir(tmp_path):
    """Keep the application log file out of the real user log dir."""
    with patch("pomodoro_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

COMMAND_MODULES = ("timer", "stats", "settings", "sounds", "notifications")


@pytest.fixture()
def cli_engine(engine):
    """Route every command's get_engine() to the in-memory test engine."""
    patches = [
        patch(f"pomodoro_cli.commands.{name}.get_engine", return_value=engine)
        for name in COMMAND_MODULES
    ]
    for p in patches:
        p.start()
    yield engine
    for p in patches:
        p.stop()


@pytest.fixture()
def cli_config(tmp_config):
    """Route get_config_service() to a ConfigService in a temp directory."""
    with patch(
        "pomodoro_cli.services.config_service.get_config_service", return_value=tmp_config
    ), patch(
        "pomodoro_cli.commands.config.get_config_service", return_value=tmp_config
    ), patch(
        "pomodoro_cli.commands.timer.get_config_service", return_value=tmp_config
    ), patch(
        "pomodoro_cli.commands.notifications.get_config_service", return_value=tmp_config
    ), patch(
        "pomodoro_cli.main.get_config_service", return_value=tmp_config
    ):
        yield tmp_config
