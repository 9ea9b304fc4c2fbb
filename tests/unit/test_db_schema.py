# ABOUTME: Unit tests for database schema creation and connection management.
# ABOUTME: Validates the kv table, schema version, WAL mode, and default paths.

import sqlite3
from pathlib import Path

import pytest

from readlog.db import connection
from readlog.db.connection import DEFAULT_DB_PATH, MEMORY, open_database, schema_version


class TestOpenDatabase:
    """Tests for open_database() connection factory."""

    def test_creates_database_file(self, db_path: Path) -> None:
        conn = open_database(db_path)
        conn.close()
        assert db_path.exists()

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        nested = tmp_path / "deep" / "nested" / "readlog.db"
        conn = open_database(nested)
        conn.close()
        assert nested.exists()

    def test_creates_kv_table(self, db_path: Path) -> None:
        conn = open_database(db_path)
        columns = {row[1] for row in conn.execute("PRAGMA table_info(kv)").fetchall()}
        conn.close()
        assert columns == {"key", "value", "updated_at"}

    def test_schema_version_is_one(self, db_path: Path) -> None:
        conn = open_database(db_path)
        rows = conn.execute("SELECT version FROM schema_version").fetchall()
        conn.close()
        assert [r[0] for r in rows] == [1]

    def test_reopen_does_not_reapply_schema(self, db_path: Path) -> None:
        open_database(db_path).close()
        conn = open_database(db_path)
        count = conn.execute("SELECT COUNT(*) FROM schema_version").fetchone()[0]
        conn.close()
        assert count == 1

    def test_wal_mode(self, db_path: Path) -> None:
        conn = open_database(db_path)
        mode = conn.execute("PRAGMA journal_mode").fetchone()[0]
        conn.close()
        assert mode == "wal"

    def test_row_factory(self, db_path: Path) -> None:
        conn = open_database(db_path)
        assert conn.row_factory is sqlite3.Row
        conn.close()

    def test_default_path(self) -> None:
        assert DEFAULT_DB_PATH == Path.home() / ".readlog" / "readlog.db"

    def test_in_memory_database(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """":memory:" opens a schema-ready store without touching the filesystem."""
        monkeypatch.chdir(tmp_path)
        conn = open_database(Path(MEMORY))
        assert schema_version(conn) == 1
        conn.close()
        assert list(tmp_path.iterdir()) == []


class TestSchemaVersion:
    """Tests for schema_version() and migration upgrades."""

    def test_empty_database_is_zero(self) -> None:
        conn = sqlite3.connect(MEMORY)
        assert schema_version(conn) == 0
        conn.close()

    def test_pending_migration_is_applied_once(
        self, db_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        open_database(db_path).close()
        migration = (
            "CREATE TABLE shelf_note (note TEXT);"
            "INSERT INTO schema_version (version) VALUES (2);"
        )
        monkeypatch.setattr(connection, "MIGRATIONS", [(2, migration)])

        open_database(db_path).close()
        conn = open_database(db_path)
        version = schema_version(conn)
        tables = {r[0] for r in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}
        conn.close()

        assert version == 2
        assert "shelf_note" in tables
