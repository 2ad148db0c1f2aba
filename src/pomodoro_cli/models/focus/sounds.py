"""Completion sound catalogue."""

from typing import Literal, get_args

SoundOption = Literal["tri-tone", "chime", "bell", "digital", "gentle", "none"]

SOUND_OPTIONS: tuple[SoundOption, ...] = get_args(SoundOption)

DEFAULT_SOUND: SoundOption = "tri-tone"

SOUND_LABELS: dict[SoundOption, str] = {
    "tri-tone": "Tri-tone",
    "chime": "Chime",
    "bell": "Bell",
    "digital": "Digital",
    "gentle": "Gentle",
    "none": "None",
}


def is_sound_option(value: str) -> bool:
    """Check whether ``value`` is a known sound id."""
    return value in SOUND_OPTIONS


def is_silent(sound: SoundOption) -> bool:
    """The ``none`` option never produces audio."""
    return sound == "none"
