"""Focus engine: the public face of the timer core.

Composes settings, session log, statistics and the countdown state machine,
and coordinates the side effects of a completed interval (session record,
completion sound, desktop notification). Every collaborator is injected.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .modes import COMPLETION_MESSAGES, TimerMode
from .session_log import PomodoroSession, SessionLog
from .settings import TimerSettings
from .sounds import SoundOption
from .statistics import DailyStat, FocusStatistics
from .timer import TimerStateMachine

if TYPE_CHECKING:
    from pomodoro_cli.repositories.repository import (
        Clock,
        KeyValueStore,
        NotificationSink,
        SoundSink,
    )

logger = logging.getLogger(__name__)

ChangeListener = Callable[["FocusEngine"], None]
CompletionListener = Callable[[TimerMode], None]


@dataclass(frozen=True)
class EngineSnapshot:
    """Observable engine state at one point in time."""

    current_mode: TimerMode
    remaining: int
    time_string: str
    progress: float
    is_running: bool
    completed_work_count: int
    long_break_interval: int
    notification_permission_granted: bool


class FocusEngine:
    """Pomodoro timer with session history and statistics.

    All operations, including permission answers arriving from other threads,
    run under one re-entrant lock, so a tick and its completion cascade are
    never interleaved with anything else.
    """

    def __init__(
        self,
        store: KeyValueStore,
        clock: Clock,
        notification_sink: NotificationSink,
        sound_sink: SoundSink,
    ):
        self._lock = threading.RLock()
        self._clock = clock
        self._notifications = notification_sink
        self._sound = sound_sink
        self._listeners: list[ChangeListener] = []
        self._completion_listeners: list[CompletionListener] = []
        self._permission_granted = False

        self.settings = TimerSettings(store)
        self.session_log = SessionLog(store)
        self.timer = TimerStateMachine(
            minutes_for=self.settings.minutes_for,
            long_break_interval=lambda: self.settings.long_break_interval,
            on_complete=self._handle_completion,
        )
        self._sound.selected_sound = self.settings.selected_sound

        with self._lock:
            self._notifications.check_permission(self._apply_permission)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Call ``listener`` after every state change. Returns an unsubscriber."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def on_completed(self, listener: CompletionListener) -> Callable[[], None]:
        """Call ``listener`` with the finished mode after each completion."""
        with self._lock:
            self._completion_listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._completion_listeners:
                    self._completion_listeners.remove(listener)

        return unsubscribe

    def _emit(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("change listener failed")

    # ------------------------------------------------------------------
    # Timer controls
    # ------------------------------------------------------------------

    def start(self) -> None:
        with self._lock:
            self.timer.start()
            self._emit()

    def pause(self) -> None:
        with self._lock:
            self.timer.pause()
            self._emit()

    def start_pause(self) -> None:
        with self._lock:
            self.timer.start_pause()
            self._emit()

    def reset(self) -> None:
        with self._lock:
            self.timer.reset()
            self._emit()

    def switch_mode(self, mode: TimerMode) -> None:
        with self._lock:
            self.timer.switch_mode(mode)
            self._emit()

    def tick(self) -> TimerMode | None:
        """Advance the countdown by one second.

        Returns:
            The completed mode if this tick finished an interval.
        """
        with self._lock:
            finished = self.timer.tick()
            if finished is not None:
                for listener in list(self._completion_listeners):
                    try:
                        listener(finished)
                    except Exception:
                        logger.exception("completion listener failed")
            self._emit()
            return finished

    def duration_for(self, mode: TimerMode) -> int:
        """Length of ``mode`` in seconds."""
        return self.timer.duration_for(mode)

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    def record_session(self, mode: TimerMode) -> PomodoroSession:
        """Log a completed ``mode`` interval at the current time."""
        with self._lock:
            session = self.session_log.record(mode, self._clock.now())
            logger.info("recorded %s session %s", mode, session.id)
            self._emit()
            return session

    def clear_all_sessions(self) -> None:
        """Forget all history and restart the long-break cadence."""
        with self._lock:
            self.session_log.clear()
            self.timer.clear_completed_work_count()
            logger.info("cleared all sessions")
            self._emit()

    def _handle_completion(self, mode: TimerMode) -> None:
        logger.info("%s interval completed", mode)
        try:
            self._sound.play_completion()
        except Exception as e:
            logger.warning("completion sound failed: %s", e)
        self._send_completion_notification(mode)
        # No emit here; tick() emits once the state machine has routed
        session = self.session_log.record(mode, self._clock.now())
        logger.info("recorded %s session %s", mode, session.id)

    def _send_completion_notification(self, mode: TimerMode) -> None:
        title, body = COMPLETION_MESSAGES[mode]
        self.send_notification(title, body)

    def send_notification(self, title: str, body: str) -> bool:
        """Deliver a notification if permitted.

        Returns:
            True if the sink was asked to deliver it.
        """
        if not self._permission_granted:
            return False
        try:
            self._notifications.send(title, body)
        except Exception as e:
            logger.warning("notification delivery failed: %s", e)
            return False
        return True

    def cancel_notifications(self) -> None:
        """Withdraw pending notifications."""
        try:
            self._notifications.cancel_all()
        except Exception as e:
            logger.warning("cancelling notifications failed: %s", e)

    # ------------------------------------------------------------------
    # Notifications and sound
    # ------------------------------------------------------------------

    def _apply_permission(self, granted: bool) -> None:
        with self._lock:
            self._permission_granted = bool(granted)
            logger.debug("notification permission: %s", self._permission_granted)
            self._emit()

    def request_notification_permission(self) -> Future | None:
        """Ask the notification sink for permission; the answer updates state.

        Returns:
            The sink's Future when it answers asynchronously, else None.
        """
        with self._lock:
            return self._notifications.request_permission(self._apply_permission)

    def refresh_notification_permission(self) -> Future | None:
        """Re-read the current permission state from the sink."""
        with self._lock:
            return self._notifications.check_permission(self._apply_permission)

    @property
    def notification_permission_granted(self) -> bool:
        return self._permission_granted

    def preview_sound(self, sound: SoundOption) -> None:
        """Play ``sound`` once. Failures are logged, not raised."""
        try:
            self._sound.play_preview(sound)
        except Exception as e:
            logger.warning("sound preview failed: %s", e)

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    def _set_duration(self, mode: TimerMode, attr: str, value: int) -> None:
        with self._lock:
            setattr(self.settings, attr, value)
            self.timer.reload(mode)
            self._emit()

    @property
    def work_minutes(self) -> int:
        return self.settings.work_minutes

    @work_minutes.setter
    def work_minutes(self, value: int) -> None:
        self._set_duration("work", "work_minutes", value)

    @property
    def short_break_minutes(self) -> int:
        return self.settings.short_break_minutes

    @short_break_minutes.setter
    def short_break_minutes(self, value: int) -> None:
        self._set_duration("short_break", "short_break_minutes", value)

    @property
    def long_break_minutes(self) -> int:
        return self.settings.long_break_minutes

    @long_break_minutes.setter
    def long_break_minutes(self, value: int) -> None:
        self._set_duration("long_break", "long_break_minutes", value)

    @property
    def long_break_interval(self) -> int:
        return self.settings.long_break_interval

    @long_break_interval.setter
    def long_break_interval(self, value: int) -> None:
        with self._lock:
            self.settings.long_break_interval = value
            self._emit()

    @property
    def selected_sound(self) -> SoundOption:
        return self.settings.selected_sound

    @selected_sound.setter
    def selected_sound(self, sound: SoundOption) -> None:
        with self._lock:
            self.settings.selected_sound = sound
            self._sound.selected_sound = sound
            self._emit()

    def reset_to_defaults(self) -> None:
        """Restore default durations and reset the countdown."""
        with self._lock:
            self.settings.reset_to_defaults()
            self.timer.reset()
            self._emit()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def current_mode(self) -> TimerMode:
        return self.timer.current_mode

    @property
    def remaining(self) -> int:
        return self.timer.remaining

    @property
    def is_running(self) -> bool:
        return self.timer.is_running

    @property
    def completed_work_count(self) -> int:
        return self.timer.completed_work_count

    @completed_work_count.setter
    def completed_work_count(self, value: int) -> None:
        with self._lock:
            self.timer.completed_work_count = value
            self._emit()

    @property
    def progress(self) -> float:
        return self.timer.progress

    @property
    def time_string(self) -> str:
        return self.timer.time_string

    @property
    def sessions(self) -> tuple[PomodoroSession, ...]:
        return self.session_log.sessions

    @property
    def statistics(self) -> FocusStatistics:
        return FocusStatistics(self.session_log.sessions, self._clock)

    @property
    def today_count(self) -> int:
        return self.statistics.today_count

    @property
    def week_count(self) -> int:
        return self.statistics.week_count

    @property
    def total_count(self) -> int:
        return self.statistics.total_count

    @property
    def weekly_stats(self) -> list[DailyStat]:
        return self.statistics.weekly_stats

    @property
    def total_focus_time_string(self) -> str:
        return self.statistics.total_focus_time_string(self.settings.work_minutes)

    def snapshot(self) -> EngineSnapshot:
        """Freeze the observable state (for rendering or JSON output)."""
        with self._lock:
            return EngineSnapshot(
                current_mode=self.timer.current_mode,
                remaining=self.timer.remaining,
                time_string=self.timer.time_string,
                progress=self.timer.progress,
                is_running=self.timer.is_running,
                completed_work_count=self.timer.completed_work_count,
                long_break_interval=self.settings.long_break_interval,
                notification_permission_granted=self._permission_granted,
            )
