"""Database connection management for the SQLite storage file.

Opens a configured connection per storage instance: WAL journal, owner-only
file permissions on first creation, and the schema applied on open.
"""

from __future__ import annotations

import os
import sqlite3
import time
from pathlib import Path

from platformdirs import user_data_dir

from progress_todo.adapters.sqlite.schema import apply_schema

APP_NAME = "progress_todo"


def default_db_path(profile: str = "default") -> Path:
    """Default database location for a profile."""
    return Path(user_data_dir(APP_NAME)) / f"{profile}.db"


def open_connection(db_path: str | Path) -> sqlite3.Connection:
    """Open and configure a connection to the storage database.

    Args:
        db_path: Path to database file; parent directories are created

    Returns:
        sqlite3.Connection ready for use
    """
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    is_new_database = not db_path.exists()

    connection = sqlite3.connect(str(db_path), timeout=30.0)
    connection.row_factory = sqlite3.Row
    connection.execute("PRAGMA journal_mode = WAL")
    apply_schema(connection)

    # Owner read/write only
    if is_new_database:
        os.chmod(db_path, 0o600)
    return connection


def execute_with_retry(
    connection: sqlite3.Connection,
    sql: str,
    params: tuple | dict | None = None,
    max_retries: int = 3,
) -> sqlite3.Cursor:
    """Execute SQL with retry logic for database locked errors.

    Args:
        connection: Database connection
        sql: SQL statement to execute
        params: Parameters for SQL statement
        max_retries: Maximum number of retry attempts

    Returns:
        Cursor after successful execution

    Raises:
        sqlite3.OperationalError: If database remains locked after retries
    """
    for attempt in range(max_retries):
        try:
            if params:
                return connection.execute(sql, params)
            return connection.execute(sql)
        except sqlite3.OperationalError as e:
            if "database is locked" in str(e) and attempt < max_retries - 1:
                # Exponential backoff: 0.1s, 0.2s, 0.4s
                time.sleep(0.1 * (2**attempt))
                continue
            raise

    raise sqlite3.OperationalError("Max retries exceeded")
