"""Completed-session history persisted as a single JSON blob."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterator
from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .modes import TimerMode

if TYPE_CHECKING:
    from pomodoro_cli.repositories.repository import KeyValueStore

logger = logging.getLogger(__name__)

SESSIONS_KEY = "pomodoroSessions"


class PomodoroSession(BaseModel):
    """One completed interval. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    timestamp: datetime
    mode: TimerMode


_SESSIONS_ADAPTER = TypeAdapter(list[PomodoroSession])


class SessionLog:
    """Append-only, ordered record of completed sessions.

    The whole log is rewritten to the store on every change; there is no
    incremental format. A missing or unreadable blob loads as an empty log.
    """

    def __init__(self, store: KeyValueStore):
        self._store = store
        self._sessions: list[PomodoroSession] = self._load()

    @staticmethod
    def serialize(sessions: list[PomodoroSession] | tuple[PomodoroSession, ...]) -> bytes:
        """Encode sessions as a JSON array of ``{id, timestamp, mode}`` records."""
        return _SESSIONS_ADAPTER.dump_json(list(sessions))

    @staticmethod
    def deserialize(data: bytes) -> list[PomodoroSession]:
        """Decode a blob written by :meth:`serialize`.

        Raises:
            ValueError: If the blob is not a valid session list.
        """
        try:
            return _SESSIONS_ADAPTER.validate_json(data)
        except ValidationError as e:
            raise ValueError(f"Invalid session log: {e.error_count()} errors") from e

    def _load(self) -> list[PomodoroSession]:
        data = self._store.get_blob(SESSIONS_KEY)
        if data is None:
            return []
        try:
            return self.deserialize(data)
        except ValueError as e:
            logger.debug("discarding unreadable session log: %s", e)
            return []

    def _save(self) -> None:
        self._store.set_blob(SESSIONS_KEY, self.serialize(self._sessions))

    @property
    def sessions(self) -> tuple[PomodoroSession, ...]:
        """Snapshot of the log in insertion order."""
        return tuple(self._sessions)

    def record(self, mode: TimerMode, timestamp: datetime) -> PomodoroSession:
        """Append a session for ``mode`` completed at ``timestamp`` and persist."""
        session = PomodoroSession(timestamp=timestamp, mode=mode)
        self._sessions.append(session)
        self._save()
        return session

    def clear(self) -> None:
        """Drop every session and persist the empty log."""
        self._sessions.clear()
        self._save()

    def recent(self, limit: int = 20) -> list[PomodoroSession]:
        """Most recent sessions first."""
        if limit <= 0:
            return []
        return list(reversed(self._sessions[-limit:]))

    def __iter__(self) -> Iterator[PomodoroSession]:
        return iter(tuple(self._sessions))

    def __len__(self) -> int:
        return len(self._sessions)
