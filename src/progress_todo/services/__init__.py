"""Services module for progress-todo - Business logic layer."""

from .persistent_store import DEFAULT_STORAGE_KEY, PersistentStore
from .task_manager import TaskManager

__all__ = [
    "TaskManager",
    "PersistentStore",
    "DEFAULT_STORAGE_KEY",
]
