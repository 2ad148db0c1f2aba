"""In-memory key/value store."""

from __future__ import annotations

from pomodoro_cli.repositories.repository import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed store. Nothing survives the process."""

    def __init__(self, initial: dict[str, int | bytes] | None = None):
        self.data: dict[str, int | bytes] = dict(initial or {})

    def get_int(self, key: str) -> int | None:
        value = self.data.get(key)
        return value if isinstance(value, int) else None

    def set_int(self, key: str, value: int) -> None:
        self.data[key] = int(value)

    def get_blob(self, key: str) -> bytes | None:
        value = self.data.get(key)
        return value if isinstance(value, bytes) else None

    def set_blob(self, key: str, data: bytes) -> None:
        self.data[key] = bytes(data)

    def remove(self, key: str) -> None:
        self.data.pop(key, None)
