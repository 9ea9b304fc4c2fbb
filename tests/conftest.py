# ABOUTME: Shared pytest fixtures for readlog tests.
# ABOUTME: Provides SQLite-backed, in-memory, and failing key-value stores plus a BookStore.

from pathlib import Path

import pytest

from readlog.db.connection import open_database
from readlog.db.kv import SqliteKeyValueStore
from readlog.db.store import BookStore
from tests.fixtures.storage import MemoryKeyValueStore, UnavailableKeyValueStore


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path to a temporary readlog database."""
    return tmp_path / "readlog.db"


@pytest.fixture
def kv(db_path: Path):
    """SqliteKeyValueStore over a fresh temporary database."""
    conn = open_database(db_path)
    yield SqliteKeyValueStore(conn)
    conn.close()


@pytest.fixture
def memory_kv() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def unavailable_kv() -> UnavailableKeyValueStore:
    return UnavailableKeyValueStore()


@pytest.fixture
def store(kv: SqliteKeyValueStore) -> BookStore:
    """BookStore over a fresh temporary database."""
    return BookStore(kv)
