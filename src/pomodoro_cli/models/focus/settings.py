"""Durable timer settings backed by the key/value store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .modes import TimerMode
from .sounds import DEFAULT_SOUND, SoundOption, is_sound_option

if TYPE_CHECKING:
    from pomodoro_cli.repositories.repository import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_WORK_MINUTES = 25
DEFAULT_SHORT_BREAK_MINUTES = 5
DEFAULT_LONG_BREAK_MINUTES = 15
DEFAULT_LONG_BREAK_INTERVAL = 4

MIN_DURATION_MINUTES = 1
MIN_LONG_BREAK_INTERVAL = 2


class SettingsKeys:
    """Stable store keys."""

    WORK_DURATION = "workDuration"
    SHORT_BREAK_DURATION = "shortBreakDuration"
    LONG_BREAK_DURATION = "longBreakDuration"
    LONG_BREAK_INTERVAL = "longBreakInterval"
    SELECTED_SOUND = "selectedSound"


def _clamp(name: str, value: int, minimum: int) -> int:
    value = int(value)
    if value < minimum:
        logger.warning("%s=%d is below %d, clamping", name, value, minimum)
        return minimum
    return value


class TimerSettings:
    """Timer durations, long-break cadence and completion sound.

    Every field is read from the store once at construction (missing keys fall
    back to the defaults) and every setter writes straight back. Values that
    break the invariants (durations >= 1 minute, interval >= 2) are clamped.
    """

    def __init__(self, store: KeyValueStore):
        self._store = store
        self._work_minutes = self._load_int(
            SettingsKeys.WORK_DURATION, DEFAULT_WORK_MINUTES, MIN_DURATION_MINUTES
        )
        self._short_break_minutes = self._load_int(
            SettingsKeys.SHORT_BREAK_DURATION,
            DEFAULT_SHORT_BREAK_MINUTES,
            MIN_DURATION_MINUTES,
        )
        self._long_break_minutes = self._load_int(
            SettingsKeys.LONG_BREAK_DURATION,
            DEFAULT_LONG_BREAK_MINUTES,
            MIN_DURATION_MINUTES,
        )
        self._long_break_interval = self._load_int(
            SettingsKeys.LONG_BREAK_INTERVAL,
            DEFAULT_LONG_BREAK_INTERVAL,
            MIN_LONG_BREAK_INTERVAL,
        )
        self._selected_sound = self._load_sound()

    def _load_int(self, key: str, default: int, minimum: int) -> int:
        value = self._store.get_int(key)
        if value is None:
            return default
        return _clamp(key, value, minimum)

    def _load_sound(self) -> SoundOption:
        raw = self._store.get_blob(SettingsKeys.SELECTED_SOUND)
        if raw is None:
            return DEFAULT_SOUND
        sound = raw.decode("utf-8", errors="replace")
        if not is_sound_option(sound):
            logger.debug("unknown stored sound %r, using default", sound)
            return DEFAULT_SOUND
        return sound  # type: ignore[return-value]

    @property
    def work_minutes(self) -> int:
        return self._work_minutes

    @work_minutes.setter
    def work_minutes(self, value: int) -> None:
        self._work_minutes = _clamp("work_minutes", value, MIN_DURATION_MINUTES)
        self._store.set_int(SettingsKeys.WORK_DURATION, self._work_minutes)

    @property
    def short_break_minutes(self) -> int:
        return self._short_break_minutes

    @short_break_minutes.setter
    def short_break_minutes(self, value: int) -> None:
        self._short_break_minutes = _clamp(
            "short_break_minutes", value, MIN_DURATION_MINUTES
        )
        self._store.set_int(
            SettingsKeys.SHORT_BREAK_DURATION, self._short_break_minutes
        )

    @property
    def long_break_minutes(self) -> int:
        return self._long_break_minutes

    @long_break_minutes.setter
    def long_break_minutes(self, value: int) -> None:
        self._long_break_minutes = _clamp(
            "long_break_minutes", value, MIN_DURATION_MINUTES
        )
        self._store.set_int(SettingsKeys.LONG_BREAK_DURATION, self._long_break_minutes)

    @property
    def long_break_interval(self) -> int:
        return self._long_break_interval

    @long_break_interval.setter
    def long_break_interval(self, value: int) -> None:
        self._long_break_interval = _clamp(
            "long_break_interval", value, MIN_LONG_BREAK_INTERVAL
        )
        self._store.set_int(SettingsKeys.LONG_BREAK_INTERVAL, self._long_break_interval)

    @property
    def selected_sound(self) -> SoundOption:
        return self._selected_sound

    @selected_sound.setter
    def selected_sound(self, sound: SoundOption) -> None:
        if not is_sound_option(sound):
            raise ValueError(f"Unknown sound: {sound}")
        self._selected_sound = sound
        self._store.set_blob(SettingsKeys.SELECTED_SOUND, sound.encode("utf-8"))

    def minutes_for(self, mode: TimerMode) -> int:
        """Configured length of ``mode`` in minutes."""
        if mode == "work":
            return self._work_minutes
        elif mode == "short_break":
            return self._short_break_minutes
        else:  # long_break
            return self._long_break_minutes

    def reset_to_defaults(self) -> None:
        """Restore the four numeric fields. The sound choice is kept."""
        self.work_minutes = DEFAULT_WORK_MINUTES
        self.short_break_minutes = DEFAULT_SHORT_BREAK_MINUTES
        self.long_break_minutes = DEFAULT_LONG_BREAK_MINUTES
        self.long_break_interval = DEFAULT_LONG_BREAK_INTERVAL

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "work_minutes": self._work_minutes,
            "short_break_minutes": self._short_break_minutes,
            "long_break_minutes": self._long_break_minutes,
            "long_break_interval": self._long_break_interval,
            "selected_sound": self._selected_sound,
        }
