# ABOUTME: Public API for the readlog persistence layer.
# ABOUTME: Exports connection management, the key-value store, BookStore, and the Book record.

from readlog.db.connection import DEFAULT_DB_PATH, open_database
from readlog.db.kv import KeyValueStore, SqliteKeyValueStore, StorageError
from readlog.db.mapping import Book
from readlog.db.store import BookStore

__all__ = [
    "DEFAULT_DB_PATH",
    "Book",
    "BookStore",
    "KeyValueStore",
    "SqliteKeyValueStore",
    "StorageError",
    "open_database",
]
