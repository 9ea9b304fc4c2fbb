# ABOUTME: Opens the readlog SQLite file and brings its schema up to date.
# ABOUTME: Also accepts ":memory:" for a throwaway store when the file is unusable.

import sqlite3
from pathlib import Path

from readlog.db.schema import MIGRATIONS, SCHEMA_V1

DEFAULT_DB_PATH = Path.home() / ".readlog" / "readlog.db"

MEMORY = ":memory:"


def schema_version(conn: sqlite3.Connection) -> int:
    """Highest applied schema version, or 0 for a database with no schema."""
    has_table = conn.execute(
        "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = 'schema_version'"
    ).fetchone()
    if has_table is None:
        return 0
    row = conn.execute("SELECT MAX(version) FROM schema_version").fetchone()
    return row[0] or 0


def _upgrade(conn: sqlite3.Connection) -> None:
    version = schema_version(conn)
    if version == 0:
        conn.executescript(SCHEMA_V1)
        version = 1
    for target, sql in MIGRATIONS:
        if target > version:
            conn.executescript(sql)


def open_database(path: Path | None = None) -> sqlite3.Connection:
    """Return a connection to the readlog database at path.

    The file and its directory are created on first use. Rows come back as
    sqlite3.Row. A scan may feed the pipeline from a decoder thread, so the
    connection is not tied to the thread that opened it; BookStore's lock
    keeps its read-modify-write cycles from interleaving.

    Args:
        path: Database file, or Path(":memory:"). Defaults to DEFAULT_DB_PATH.

    Raises:
        OSError: The parent directory cannot be created.
        sqlite3.Error: The file exists but is not a usable database.
    """
    db_path = path or DEFAULT_DB_PATH
    in_memory = str(db_path) == MEMORY
    if not in_memory:
        db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    if not in_memory:
        conn.execute("PRAGMA journal_mode=WAL")
    _upgrade(conn)
    return conn
