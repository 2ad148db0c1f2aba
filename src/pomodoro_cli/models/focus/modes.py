"""Timer modes and their presentation-agnostic attributes."""

from typing import Literal, get_args

TimerMode = Literal["work", "short_break", "long_break"]

TIMER_MODES: tuple[TimerMode, ...] = get_args(TimerMode)

MODE_LABELS: dict[TimerMode, str] = {
    "work": "Work",
    "short_break": "Short Break",
    "long_break": "Long Break",
}

# Completion notification (title, body) per finished mode
COMPLETION_MESSAGES: dict[TimerMode, tuple[str, str]] = {
    "work": ("Focus Session Complete!", "Great work! Time for a break."),
    "short_break": ("Break Over", "Ready to focus again?"),
    "long_break": ("Long Break Over", "Feeling refreshed? Let's get back to work!"),
}


def is_timer_mode(value: str) -> bool:
    """Check whether ``value`` names a timer mode."""
    return value in TIMER_MODES
