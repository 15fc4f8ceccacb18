"""Construction of the storage stack from configuration."""

from __future__ import annotations

from progress_todo.adapters import InMemoryKeyValueStorage, SqliteKeyValueStorage
from progress_todo.config import ConfigManager
from progress_todo.repositories import KeyValueStorage
from progress_todo.services.persistent_store import PersistentStore
from progress_todo.services.task_manager import TaskManager


def create_storage(config_manager: ConfigManager) -> KeyValueStorage:
    """Create the key-value backend named by ``storage.backend``."""
    storage_config = config_manager.config.storage
    if storage_config.backend == "memory":
        return InMemoryKeyValueStorage(quota_bytes=storage_config.quota_bytes)
    return SqliteKeyValueStorage(config_manager.db_path)


def create_task_manager(
    config_manager: ConfigManager,
    storage: KeyValueStorage | None = None,
) -> TaskManager:
    """Build a TaskManager for the profile held by ``config_manager``.

    Args:
        config_manager: Source of storage settings
        storage: Optional backend to use instead of the configured one
    """
    if storage is None:
        storage = create_storage(config_manager)
    store = PersistentStore(storage, key=config_manager.config.storage.key)
    return TaskManager(store)
