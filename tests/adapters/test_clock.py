"""Tests for the SystemClock adapter."""

from __future__ import annotations

import time
from datetime import datetime, timedelta

import pytest

from pomodoro_cli.adapters.clock import SystemClock
from pomodoro_cli.models.focus.session_log import PomodoroSession
from pomodoro_cli.models.focus.statistics import FocusStatistics


def local(*args) -> datetime:
    """Aware datetime for the given local wall time."""
    return datetime(*args).astimezone()


class FrozenSystemClock(SystemClock):
    """SystemClock calendar arithmetic with a fixed ``now``."""

    def __init__(self, now: datetime):
        self.current = now

    def now(self) -> datetime:
        return self.current


@pytest.fixture()
def new_york(monkeypatch):
    """Run the test with the local timezone set to America/New_York."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_now_is_timezone_aware():
    assert SystemClock().now().tzinfo is not None


def test_start_of_day_is_midnight():
    clock = SystemClock()
    start = clock.start_of_day(clock.now())

    assert (start.hour, start.minute, start.second, start.microsecond) == (0, 0, 0, 0)
    assert start.date() == clock.now().date()


def test_start_of_day_naive():
    moment = datetime(2024, 3, 15, 14, 30)
    assert SystemClock().start_of_day(moment) == datetime(2024, 3, 15)


def test_add_days():
    moment = local(2024, 2, 28, 9, 0)
    clock = SystemClock()

    assert clock.add_days(moment, 1) == local(2024, 2, 29, 9, 0)
    assert clock.add_days(moment, -7).date().isoformat() == "2024-02-21"


def test_add_days_naive():
    assert SystemClock().add_days(datetime(2024, 12, 31), 1) == datetime(2025, 1, 1)


class TestDaylightSaving:
    def test_spring_forward_day_is_23_hours(self, new_york):
        clock = SystemClock()
        start = clock.start_of_day(local(2024, 3, 10, 12, 0))
        end = clock.add_days(start, 1)

        assert end == local(2024, 3, 11)
        assert end - start == timedelta(hours=23)
        assert end.utcoffset() == timedelta(hours=-4)

    def test_fall_back_day_is_25_hours(self, new_york):
        clock = SystemClock()
        start = clock.start_of_day(local(2024, 11, 3, 12, 0))
        end = clock.add_days(start, 1)

        assert end == local(2024, 11, 4)
        assert end - start == timedelta(hours=25)

    def test_session_after_spring_forward_counted_once(self, new_york):
        clock = FrozenSystemClock(local(2024, 3, 12, 12, 0))
        sessions = [PomodoroSession(timestamp=local(2024, 3, 11, 0, 30), mode="work")]

        weekly = FocusStatistics(sessions, clock).weekly_stats

        assert sum(day.count for day in weekly) == 1
        assert [d.count for d in weekly if d.date.isoformat() == "2024-03-11"] == [1]

    def test_late_session_on_fall_back_day_is_today(self, new_york):
        moment = local(2024, 11, 3, 23, 30)
        clock = FrozenSystemClock(moment)
        sessions = [PomodoroSession(timestamp=moment, mode="work")]

        assert FocusStatistics(sessions, clock).today_count == 1
