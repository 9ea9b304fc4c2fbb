# ABOUTME: Shared Click options and helpers for readlog CLI commands.
# ABOUTME: Provides the --db option and a context manager that opens the key-value store.

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click

from readlog.db.connection import DEFAULT_DB_PATH, MEMORY, open_database
from readlog.db.kv import SqliteKeyValueStore

logger = logging.getLogger(__name__)

_IN_MEMORY = Path(MEMORY)

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    default=None,
    envvar="READLOG_DB",
    help=f"Path to readlog database (default: {DEFAULT_DB_PATH}, env: READLOG_DB)",
)


@contextmanager
def open_kv(db_path: Path | None) -> Iterator[SqliteKeyValueStore]:
    """Open the key-value store for a command and close it afterwards.

    If the database cannot be opened the command still runs against a
    throwaway in-memory store: reads come back empty and writes are lost.
    """
    path = db_path or DEFAULT_DB_PATH
    try:
        conn = open_database(path)
    except (OSError, sqlite3.Error) as exc:
        logger.warning("Cannot open %s, changes will not be saved: %s", path, exc)
        conn = open_database(_IN_MEMORY)
    try:
        yield SqliteKeyValueStore(conn)
    finally:
        conn.close()
