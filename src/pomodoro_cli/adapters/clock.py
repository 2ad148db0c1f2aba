"""System clock adapter."""

from __future__ import annotations

from datetime import datetime, timedelta

from pomodoro_cli.repositories.repository import Clock


class SystemClock(Clock):
    """Wall-clock time in the local timezone."""

    def now(self) -> datetime:
        return datetime.now().astimezone()

    def start_of_day(self, moment: datetime) -> datetime:
        midnight = moment.replace(hour=0, minute=0, second=0, microsecond=0)
        if midnight.tzinfo is None:
            return midnight
        # Re-resolve the offset; midnight may fall on the other side of a DST change
        return midnight.replace(tzinfo=None).astimezone()

    def add_days(self, moment: datetime, days: int) -> datetime:
        shifted = moment + timedelta(days=days)
        if shifted.tzinfo is None:
            return shifted
        # Calendar days, not 24h: keep the wall time and re-resolve the offset
        return shifted.replace(tzinfo=None).astimezone()
