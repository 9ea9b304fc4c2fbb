# ABOUTME: Key-value persistence over the kv table, plus the storage protocol it satisfies.
# ABOUTME: Wraps every sqlite3 failure in StorageError so callers can degrade gracefully.

import sqlite3
from typing import Protocol, runtime_checkable

BOOKS_KEY = "libraryBooks"
CORRUPT_BOOKS_KEY = "libraryBooks.corrupt"
STREAK_KEY = "streak"
LAST_READING_DATE_KEY = "lastReadingDate"


class StorageError(Exception):
    """Raised when the persistence layer cannot be read or written."""


@runtime_checkable
class KeyValueStore(Protocol):
    """Protocol for string-keyed, string-valued persistence."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class SqliteKeyValueStore:
    """KeyValueStore backed by the `kv` table of a readlog database.

    Each set() is a single committed statement, so a reader never
    observes a partially written value.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""
        try:
            cursor = self._conn.execute("SELECT value FROM kv WHERE key = ?", (key,))
            row = cursor.fetchone()
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot read {key!r}: {exc}") from exc
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        """Insert or replace a value and commit."""
        try:
            self._conn.execute(
                "INSERT INTO kv (key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value, "
                "updated_at = strftime('%Y-%m-%dT%H:%M:%S', 'now')",
                (key, value),
            )
            self._conn.commit()
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot write {key!r}: {exc}") from exc
