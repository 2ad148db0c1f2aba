"""Countdown and mode state machine."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .modes import TimerMode


@dataclass
class TimerState:
    """Ephemeral countdown state. Never persisted."""

    current_mode: TimerMode
    remaining: int  # seconds
    running: bool = False
    completed_work_count: int = 0


class TimerStateMachine:
    """Idle/Running countdown over Work, Short Break and Long Break.

    Time only moves through :meth:`tick`, which the caller invokes once per
    elapsed second. A tick that finds the countdown already at zero completes
    the interval: the timer pauses, ``on_complete`` is told which mode
    finished, and the machine switches to the next mode, idle and reloaded.

    Args:
        minutes_for: Configured length of a mode in minutes.
        long_break_interval: Work sessions per long break (read at completion).
        on_complete: Called with the finished mode before the mode switch.
    """

    def __init__(
        self,
        minutes_for: Callable[[TimerMode], int],
        long_break_interval: Callable[[], int],
        on_complete: Callable[[TimerMode], None] | None = None,
    ):
        self._minutes_for = minutes_for
        self._long_break_interval = long_break_interval
        self._on_complete = on_complete
        self.state = TimerState(current_mode="work", remaining=self.duration_for("work"))

    def duration_for(self, mode: TimerMode) -> int:
        """Length of ``mode`` in seconds."""
        return self._minutes_for(mode) * 60

    @property
    def current_mode(self) -> TimerMode:
        return self.state.current_mode

    @property
    def remaining(self) -> int:
        return self.state.remaining

    @property
    def is_running(self) -> bool:
        return self.state.running

    @property
    def completed_work_count(self) -> int:
        return self.state.completed_work_count

    @completed_work_count.setter
    def completed_work_count(self, value: int) -> None:
        self.state.completed_work_count = max(0, int(value))

    def start(self) -> None:
        self.state.running = True

    def pause(self) -> None:
        self.state.running = False

    def start_pause(self) -> None:
        if self.state.running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        """Stop and reload the current mode's full duration."""
        self.pause()
        self.state.remaining = self.duration_for(self.state.current_mode)

    def switch_mode(self, mode: TimerMode) -> None:
        """Stop and jump to ``mode``. Partial progress is discarded."""
        self.pause()
        self.state.current_mode = mode
        self.state.remaining = self.duration_for(mode)

    def reload(self, mode: TimerMode) -> bool:
        """Pick up a new duration for ``mode`` if it is current and idle.

        Returns:
            True if the countdown was reloaded.
        """
        if self.state.current_mode != mode or self.state.running:
            return False
        self.state.remaining = self.duration_for(mode)
        return True

    def clear_completed_work_count(self) -> None:
        self.state.completed_work_count = 0

    def tick(self) -> TimerMode | None:
        """Advance one second.

        Returns:
            The completed mode if this tick finished an interval, else None.
        """
        if self.state.remaining > 0:
            self.state.remaining -= 1
            return None

        finished = self.state.current_mode
        self._complete()
        return finished

    def next_mode(self) -> TimerMode:
        """Mode that follows the current one if it completed now."""
        if self.state.current_mode != "work":
            return "work"
        if (self.state.completed_work_count + 1) % self._long_break_interval() == 0:
            return "long_break"
        return "short_break"

    def _complete(self) -> None:
        self.pause()
        finished = self.state.current_mode
        if self._on_complete is not None:
            self._on_complete(finished)

        if finished == "work":
            self.state.completed_work_count += 1
            if self.state.completed_work_count % self._long_break_interval() == 0:
                self.switch_mode("long_break")
            else:
                self.switch_mode("short_break")
        else:
            self.switch_mode("work")

    @property
    def progress(self) -> float:
        """Fraction of the interval elapsed: 0 at start, 1 at zero remaining."""
        return 1 - self.state.remaining / self.duration_for(self.state.current_mode)

    @property
    def time_string(self) -> str:
        """Remaining time as ``MM:SS``."""
        return format_clock(self.state.remaining)


def format_clock(seconds: int) -> str:
    """Render whole seconds as zero-padded ``MM:SS``."""
    seconds = int(seconds)
    return f"{seconds // 60:02d}:{seconds % 60:02d}"
