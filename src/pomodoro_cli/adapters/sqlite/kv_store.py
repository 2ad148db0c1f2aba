"""SQLite-backed key/value store.

Holds timer settings and the session log in a single local file. Writes are
committed immediately; the engine relies on every setter being durable as
soon as it returns.
"""

from __future__ import annotations

import os
import sqlite3
from datetime import datetime
from pathlib import Path

from platformdirs import user_data_dir

from pomodoro_cli.repositories.repository import KeyValueStore

SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    int_value INTEGER,
    blob_value BLOB,
    updated_at TEXT NOT NULL
)
"""


class SqliteKeyValueStore(KeyValueStore):
    """Key/value store in a SQLite file.

    Provides:
    - Automatic directory creation
    - Owner-only file permissions on first creation
    - WAL mode so a second CLI process can read while a timer runs
    """

    def __init__(self, db_path: str | Path | None = None):
        if db_path is None:
            db_path = Path(user_data_dir("pomodoro_cli")) / "pomodoro.db"
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        is_new_database = not self.db_path.exists()

        self._connection = sqlite3.connect(
            str(self.db_path),
            check_same_thread=False,
            timeout=30.0,
        )
        self._connection.execute("PRAGMA journal_mode = WAL")
        self._connection.execute(SCHEMA)
        self._connection.commit()

        if is_new_database:
            os.chmod(self.db_path, 0o600)

    def _fetch(self, key: str) -> tuple[int | None, bytes | None] | None:
        row = self._connection.execute(
            "SELECT int_value, blob_value FROM kv_store WHERE key = ?", (key,)
        ).fetchone()
        return row

    def _upsert(self, key: str, int_value: int | None, blob_value: bytes | None) -> None:
        self._connection.execute(
            """
            INSERT INTO kv_store (key, int_value, blob_value, updated_at)
            VALUES (?, ?, ?, ?)
            ON CONFLICT(key) DO UPDATE SET
                int_value = excluded.int_value,
                blob_value = excluded.blob_value,
                updated_at = excluded.updated_at
            """,
            (key, int_value, blob_value, datetime.now().isoformat()),
        )
        self._connection.commit()

    def get_int(self, key: str) -> int | None:
        row = self._fetch(key)
        if row is None:
            return None
        return row[0]

    def set_int(self, key: str, value: int) -> None:
        self._upsert(key, int(value), None)

    def get_blob(self, key: str) -> bytes | None:
        row = self._fetch(key)
        if row is None or row[1] is None:
            return None
        return bytes(row[1])

    def set_blob(self, key: str, data: bytes) -> None:
        self._upsert(key, None, sqlite3.Binary(data))

    def remove(self, key: str) -> None:
        self._connection.execute("DELETE FROM kv_store WHERE key = ?", (key,))
        self._connection.commit()

    def keys(self) -> list[str]:
        """All stored keys, sorted."""
        rows = self._connection.execute("SELECT key FROM kv_store ORDER BY key")
        return [row[0] for row in rows.fetchall()]

    def close(self) -> None:
        """Close the underlying connection."""
        self._connection.close()

    def __enter__(self) -> SqliteKeyValueStore:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
