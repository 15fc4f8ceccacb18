"""Database schema for the SQLite key-value storage."""

from __future__ import annotations

import sqlite3

SCHEMA_VERSION = 1

CREATE_STORAGE_TABLE = """
CREATE TABLE IF NOT EXISTS storage (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%fZ', 'now'))
)
"""


def apply_schema(connection: sqlite3.Connection) -> None:
    """Create tables if missing and record the schema version."""
    current = connection.execute("PRAGMA user_version").fetchone()[0]
    if current >= SCHEMA_VERSION:
        return
    with connection:
        connection.execute(CREATE_STORAGE_TABLE)
        connection.execute(f"PRAGMA user_version = {SCHEMA_VERSION}")
