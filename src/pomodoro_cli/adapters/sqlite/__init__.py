"""SQLite adapter module - Local key/value storage implementation."""

from pomodoro_cli.adapters.sqlite.kv_store import SqliteKeyValueStore

__all__ = ["SqliteKeyValueStore"]
