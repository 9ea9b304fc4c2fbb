# ABOUTME: SQL DDL statements for the readlog key-value database.
# ABOUTME: Defines the kv table and the schema version table.

SCHEMA_V1 = """
-- Key-value entries: book collection JSON, streak counter, last reading date
CREATE TABLE kv (
    key        TEXT PRIMARY KEY,
    value      TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

-- Schema versioning for future migrations
CREATE TABLE schema_version (
    version    INTEGER NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

INSERT INTO schema_version (version) VALUES (1);
"""

# Ordered (version, sql) pairs applied after SCHEMA_V1.
MIGRATIONS: list[tuple[int, str]] = []
