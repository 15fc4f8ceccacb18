"""SQLite implementation of KeyValueStorage."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from progress_todo.adapters.sqlite.connection import (
    default_db_path,
    execute_with_retry,
    open_connection,
)
from progress_todo.exceptions import StorageQuotaExceededError, StorageUnavailableError
from progress_todo.repositories import KeyValueStorage


class SqliteKeyValueStorage(KeyValueStorage):
    """Key-value storage backed by a single-table SQLite database."""

    def __init__(self, db_path: str | Path | None = None):
        """Initialize SQLite storage.

        Args:
            db_path: Optional database file path. If None, uses default location.
        """
        self.db_path = Path(db_path) if db_path is not None else default_db_path()
        self._connection: sqlite3.Connection | None = None

    @property
    def connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._connection is None:
            try:
                self._connection = open_connection(self.db_path)
            except (sqlite3.Error, OSError) as e:
                raise StorageUnavailableError(
                    f"Cannot open storage at {self.db_path}: {e}"
                ) from e
        return self._connection

    def get_item(self, key: str) -> str | None:
        try:
            row = execute_with_retry(
                self.connection, "SELECT value FROM storage WHERE key = ?", (key,)
            ).fetchone()
        except sqlite3.Error as e:
            raise StorageUnavailableError(f"Failed to read '{key}': {e}") from e
        return row["value"] if row is not None else None

    def set_item(self, key: str, value: str) -> None:
        try:
            with self.connection:
                execute_with_retry(
                    self.connection,
                    """
                    INSERT INTO storage (key, value, updated_at)
                    VALUES (?, ?, strftime('%Y-%m-%dT%H:%M:%fZ', 'now'))
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (key, value),
                )
        except sqlite3.OperationalError as e:
            if "full" in str(e):
                raise StorageQuotaExceededError(f"Storage is full: {e}") from e
            raise StorageUnavailableError(f"Failed to write '{key}': {e}") from e
        except sqlite3.Error as e:
            raise StorageUnavailableError(f"Failed to write '{key}': {e}") from e

    def remove_item(self, key: str) -> None:
        try:
            with self.connection:
                execute_with_retry(
                    self.connection, "DELETE FROM storage WHERE key = ?", (key,)
                )
        except sqlite3.Error as e:
            raise StorageUnavailableError(f"Failed to remove '{key}': {e}") from e

    def close(self) -> None:
        """Close database connection."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
