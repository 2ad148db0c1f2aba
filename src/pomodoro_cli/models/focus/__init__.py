"""Focus mode - Pomodoro timer core for Pomodoro CLI."""

from .engine import EngineSnapshot, FocusEngine
from .modes import TIMER_MODES, TimerMode
from .session_log import PomodoroSession, SessionLog
from .settings import TimerSettings
from .sounds import SOUND_OPTIONS, SoundOption
from .statistics import DailyStat, FocusStatistics
from .timer import TimerState, TimerStateMachine

__all__ = [
    "DailyStat",
    "EngineSnapshot",
    "FocusEngine",
    "FocusStatistics",
    "PomodoroSession",
    "SOUND_OPTIONS",
    "SessionLog",
    "SoundOption",
    "TIMER_MODES",
    "TimerMode",
    "TimerSettings",
    "TimerState",
    "TimerStateMachine",
]
