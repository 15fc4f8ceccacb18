"""SQLite adapter module - Local database storage implementation."""

from progress_todo.adapters.sqlite.connection import default_db_path, open_connection
from progress_todo.adapters.sqlite.key_value_storage import SqliteKeyValueStorage

__all__ = [
    "SqliteKeyValueStorage",
    "default_db_path",
    "open_connection",
]
