"""One-second tick source for the focus engine."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .engine import FocusEngine
    from .modes import TimerMode

TICK_SECONDS = 1.0


class TickScheduler:
    """Deliver at most one engine tick per elapsed second while running.

    The scheduler is polled from the UI loop. It arms itself when the engine
    starts running and disarms when it stops, so time spent paused never turns
    into a burst of catch-up ticks after resuming.
    """

    def __init__(
        self,
        engine: FocusEngine,
        monotonic: Callable[[], float] = time.monotonic,
    ):
        self.engine = engine
        self._monotonic = monotonic
        self._next_tick: float | None = None

    def poll(self) -> TimerMode | None:
        """Tick the engine if a second has passed.

        Returns:
            The completed mode if the delivered tick finished an interval.
        """
        if not self.engine.is_running:
            self._next_tick = None
            return None

        now = self._monotonic()
        if self._next_tick is None:
            self._next_tick = now + TICK_SECONDS
            return None
        if now < self._next_tick:
            return None

        # One tick per poll; a stalled loop catches up over the following polls
        self._next_tick += TICK_SECONDS
        finished = self.engine.tick()
        if finished is not None:
            self._next_tick = None
        return finished

    def seconds_until_tick(self) -> float:
        """How long the caller may sleep before the next poll is useful."""
        if self._next_tick is None:
            return TICK_SECONDS
        return max(0.0, self._next_tick - self._monotonic())
