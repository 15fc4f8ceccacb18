"""Adapters module - KeyValueStorage implementations for different backends.

- sqlite: Local SQLite database file
- memory: Process memory, optionally with a byte quota
"""

from .memory import InMemoryKeyValueStorage
from .sqlite import SqliteKeyValueStorage

__all__ = [
    "SqliteKeyValueStorage",
    "InMemoryKeyValueStorage",
]
