"""Persistent store - load/save of the serialized task list.

The whole list lives under a single storage key as a JSON array of
``{id, text, completed, createdAt}`` records. Failures of the medium or of
the data never propagate: ``load`` falls back to an empty list and ``save``
returns the error instead of raising.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from pydantic import TypeAdapter, ValidationError

from progress_todo.exceptions import StorageError, StoreReadError, StoreWriteError
from progress_todo.models import Task
from progress_todo.repositories import KeyValueStorage

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "progressTodoTasks"

_task_list_adapter = TypeAdapter(list[Task])


class PersistentStore:
    """Reads and writes the task list through a KeyValueStorage."""

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY):
        """Initialize the store.

        Args:
            storage: Durable medium to read from and write to
            key: Storage key holding the serialized list
        """
        self.storage = storage
        self.key = key

    def load(self) -> list[Task]:
        """Load the persisted task list.

        Returns:
            The stored tasks in their persisted order. An absent key, an
            unreadable medium, or malformed data all yield an empty list.
        """
        try:
            raw = self.storage.get_item(self.key)
        except StorageError as e:
            logger.error("Failed to load tasks from storage: %s", e)
            return []

        if raw is None:
            return []

        try:
            return self.parse(raw)
        except StoreReadError as e:
            logger.error("Failed to load tasks from storage: %s", e)
            return []

    def parse(self, raw: str) -> list[Task]:
        """Parse a serialized task list.

        Raises:
            StoreReadError: If the data is not a valid array of task records
        """
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoreReadError(f"stored value is not JSON: {e}") from e

        if not isinstance(data, list):
            raise StoreReadError(
                f"expected a JSON array, got {type(data).__name__}"
            )

        try:
            tasks = _task_list_adapter.validate_python(data)
        except ValidationError as e:
            raise StoreReadError(
                f"invalid task record ({e.error_count()} errors)"
            ) from e

        # 5 and "5" display and resolve the same way, so they count as one id
        seen: set[str] = set()
        for task in tasks:
            if str(task.id) in seen:
                raise StoreReadError(f"duplicate task id {task.id!r}")
            seen.add(str(task.id))
        return tasks

    def serialize(self, tasks: Iterable[Task]) -> str:
        """Serialize tasks to the persisted JSON layout."""
        return json.dumps([task.to_record() for task in tasks], ensure_ascii=False)

    def save(self, tasks: Iterable[Task]) -> StoreWriteError | None:
        """Persist the task list.

        Args:
            tasks: Tasks in display order

        Returns:
            None on success, or a StoreWriteError describing the failure
        """
        try:
            self.storage.set_item(self.key, self.serialize(tasks))
        except (StorageError, TypeError, ValueError) as e:
            logger.error("Failed to save tasks to storage: %s", e)
            error = StoreWriteError(str(e))
            error.__cause__ = e
            return error
        return None

    def clear(self) -> StoreWriteError | None:
        """Remove the persisted list entirely."""
        try:
            self.storage.remove_item(self.key)
        except StorageError as e:
            logger.error("Failed to clear task storage: %s", e)
            error = StoreWriteError(str(e))
            error.__cause__ = e
            return error
        return None
