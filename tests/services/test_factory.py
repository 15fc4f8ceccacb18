"""Tests for building the storage stack from configuration."""

from __future__ import annotations

from progress_todo.adapters import InMemoryKeyValueStorage, SqliteKeyValueStorage
from progress_todo.services.factory import create_storage, create_task_manager


def test_default_backend_is_sqlite_in_data_dir(config_manager, tmp_path):
    storage = create_storage(config_manager)
    assert isinstance(storage, SqliteKeyValueStorage)
    assert storage.db_path == tmp_path / "data" / "default.db"


def test_memory_backend_with_quota(config_manager):
    config_manager.set("storage.backend", "memory")
    config_manager.set("storage.quota_bytes", 64)
    storage = create_storage(config_manager)
    assert isinstance(storage, InMemoryKeyValueStorage)
    assert storage.quota_bytes == 64


def test_task_manager_uses_configured_key(config_manager):
    config_manager.set("storage.key", "customKey")
    storage = InMemoryKeyValueStorage()
    manager = create_task_manager(config_manager, storage=storage)
    manager.add_task("Buy milk")
    assert storage.keys() == ["customKey"]


def test_sqlite_backend_persists_between_managers(config_manager):
    manager = create_task_manager(config_manager)
    manager.add_task("Buy milk")
    manager.store.storage.close()

    reopened = create_task_manager(config_manager)
    assert [t.text for t in reopened.tasks] == ["Buy milk"]
    reopened.store.storage.close()
