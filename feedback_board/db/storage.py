"""Keyed string storage backends.

Updates:
    v0.1.0 - 2025-11-09 - Added SQLite-backed key/value store and in-memory twin.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Optional, Protocol

FEEDBACKS_KEY = "feedbacks"
THEME_KEY = "theme"

STORAGE_TABLE_SCHEMA = """
CREATE TABLE IF NOT EXISTS storage (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
);
"""


class KeyValueStorage(Protocol):
    """Storage medium holding whole values under string keys."""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...


class MemoryStorage:
    """Process-local storage used by tests and ephemeral sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class SQLiteStorage:
    """Lightweight wrapper around sqlite3 storing one row per key."""

    def __init__(self, db_path: str | Path) -> None:
        """Initialize the storage.

        Args:
            db_path (str | Path): Path to the SQLite database file.
        """

        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._connection: Optional[sqlite3.Connection] = None

    @property
    def connection(self) -> sqlite3.Connection:
        """Return or lazily initialize the SQLite connection."""
        if self._connection is None:
            self._connection = sqlite3.connect(self._db_path)
            self._connection.row_factory = sqlite3.Row
        return self._connection

    def initialize_schema(self) -> None:
        with self.connection as conn:
            conn.execute(STORAGE_TABLE_SCHEMA)

    def get_item(self, key: str) -> Optional[str]:
        with self.connection as conn:
            cursor = conn.execute("SELECT value FROM storage WHERE key = ?", (key,))
            row = cursor.fetchone()
        return row["value"] if row is not None else None

    def set_item(self, key: str, value: str) -> None:
        """Overwrite the value stored under ``key``.

        The enclosing transaction commits before returning, so the value is
        durable once this call completes.
        """

        with self.connection as conn:
            conn.execute(
                """
                INSERT INTO storage (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, value),
            )

    def remove_item(self, key: str) -> None:
        with self.connection as conn:
            conn.execute("DELETE FROM storage WHERE key = ?", (key,))

    def close(self) -> None:
        """Close and discard the active SQLite connection."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
