"""Focus statistics derived from the session log."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING

from .session_log import PomodoroSession

if TYPE_CHECKING:
    from pomodoro_cli.repositories.repository import Clock

WEEK_DAYS = 7


@dataclass(frozen=True)
class DailyStat:
    """Number of completed work sessions on one calendar day."""

    date: date
    count: int

    @property
    def day_label(self) -> str:
        """Abbreviated weekday name, e.g. ``Mon``."""
        return self.date.strftime("%a")

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"date": self.date.isoformat(), "day": self.day_label, "count": self.count}


def format_focus_time(total_minutes: int) -> str:
    """Render minutes as ``"{h}h {m}m"``, or ``"{m} min"`` below one hour."""
    hours = total_minutes // 60
    minutes = total_minutes % 60
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes} min"


class FocusStatistics:
    """Counts and histograms over completed work sessions.

    Nothing is cached: every property walks the sessions it was given,
    so results always reflect the current log and the current time.
    """

    def __init__(self, sessions: Iterable[PomodoroSession], clock: Clock):
        self._sessions = sessions
        self._clock = clock

    def _work_sessions(self) -> list[PomodoroSession]:
        return [s for s in self._sessions if s.mode == "work"]

    def _count_between(self, start: datetime, end: datetime) -> int:
        return sum(1 for s in self._work_sessions() if start <= s.timestamp < end)

    @property
    def today_count(self) -> int:
        """Work sessions on the clock's current calendar day."""
        start = self._clock.start_of_day(self._clock.now())
        return self._count_between(start, self._clock.add_days(start, 1))

    @property
    def week_count(self) -> int:
        """Work sessions in the last seven days (exact instant, inclusive)."""
        week_ago = self._clock.now() - timedelta(days=WEEK_DAYS)
        return sum(1 for s in self._work_sessions() if s.timestamp >= week_ago)

    @property
    def total_count(self) -> int:
        """All work sessions ever recorded."""
        return len(self._work_sessions())

    @property
    def weekly_stats(self) -> list[DailyStat]:
        """Seven daily counts, oldest first, ending with today."""
        now = self._clock.now()
        stats = []
        for offset in reversed(range(WEEK_DAYS)):
            day = self._clock.add_days(now, -offset)
            start = self._clock.start_of_day(day)
            end = self._clock.add_days(start, 1)
            stats.append(DailyStat(date=start.date(), count=self._count_between(start, end)))
        return stats

    def total_focus_minutes(self, work_minutes: int) -> int:
        """Total focus time, assuming every session lasted ``work_minutes``."""
        return self.total_count * work_minutes

    def total_focus_time_string(self, work_minutes: int) -> str:
        """Formatted total focus time.

        Uses the work duration passed in (the current setting), not the length
        each session actually had when it was recorded.
        """
        return format_focus_time(self.total_focus_minutes(work_minutes))

    def summary(self, work_minutes: int) -> dict:
        """All statistics as a plain dict (used for JSON output)."""
        return {
            "today": self.today_count,
            "week": self.week_count,
            "total": self.total_count,
            "total_focus_minutes": self.total_focus_minutes(work_minutes),
            "total_focus_time": self.total_focus_time_string(work_minutes),
            "weekly": [stat.to_dict() for stat in self.weekly_stats],
        }
