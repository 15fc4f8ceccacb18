"""Custom exceptions for progress-todo."""


class ProgressTodoError(Exception):
    """Base exception for all progress-todo errors."""


class StorageError(ProgressTodoError):
    """Raised by a key-value storage backend when the medium fails."""


class StorageQuotaExceededError(StorageError):
    """Raised when a write does not fit in the storage quota."""


class StorageUnavailableError(StorageError):
    """Raised when the storage medium cannot be read or written."""


class StoreError(ProgressTodoError):
    """Base for failures of the task store (serialization layer)."""


class StoreReadError(StoreError):
    """Persisted task data is unreadable or malformed."""


class StoreWriteError(StoreError):
    """Persisting the task list failed.

    Returned (not raised) by ``PersistentStore.save`` so the running session
    keeps its in-memory state.
    """
