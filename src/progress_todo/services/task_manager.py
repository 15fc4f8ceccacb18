"""Task manager - owner of the in-memory task list.

The manager is the only component that mutates the list. Every mutating
operation persists the list synchronously before returning. A failed save is
logged by the store and recorded in ``last_save_error``; the in-memory change
is kept either way.

Two processes sharing one storage key are not coordinated: the last writer
wins.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from progress_todo.exceptions import StoreWriteError
from progress_todo.models import Stats, Task, TaskFilter, generate_task_id
from progress_todo.models.task import utc_now
from progress_todo.services.persistent_store import PersistentStore

logger = logging.getLogger(__name__)


class TaskManager:
    """Service for task list state and its derived statistics."""

    def __init__(
        self,
        store: PersistentStore,
        *,
        id_factory: Callable[[], int | str] = generate_task_id,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize the manager from the persisted list.

        Args:
            store: PersistentStore used to load at startup and save after mutations
            id_factory: Produces ids for new tasks; must never repeat
            clock: Produces creation timestamps for new tasks
        """
        self.store = store
        self._id_factory = id_factory
        self._clock = clock
        self._tasks: list[Task] = store.load()
        self.last_save_error: StoreWriteError | None = None

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Read-only view of the task list in display order."""
        return tuple(self._tasks)

    @property
    def is_empty(self) -> bool:
        return not self._tasks

    @property
    def has_completed(self) -> bool:
        return any(task.completed for task in self._tasks)

    def get_task(self, task_id: int | str) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def list_tasks(self, task_filter: TaskFilter = "all") -> tuple[Task, ...]:
        """List tasks matching a filter, preserving display order.

        Args:
            task_filter: "all", "active" (not completed) or "completed"

        Returns:
            Matching tasks in their original relative order
        """
        if task_filter == "all":
            return self.tasks
        if task_filter == "active":
            return tuple(task for task in self._tasks if not task.completed)
        if task_filter == "completed":
            return tuple(task for task in self._tasks if task.completed)
        raise ValueError(f"Unknown task filter: {task_filter!r}")

    def add_task(self, raw_text: str) -> Task | None:
        """Create a task at the end of the list.

        Args:
            raw_text: Task text; surrounding whitespace is trimmed

        Returns:
            The created Task, or None when the text is empty after trimming
        """
        text = raw_text.strip()
        if not text:
            logger.debug("Rejected task with empty text")
            return None

        task_id = self._id_factory()
        while any(str(task.id) == str(task_id) for task in self._tasks):
            logger.warning("Task id %r already in use, generating another", task_id)
            task_id = self._id_factory()

        task = Task(id=task_id, text=text, created_at=self._clock())

        self._tasks.append(task)
        self._save()
        return task

    def delete_task(self, task_id: int | str) -> None:
        """Remove a task. An unknown id is a silent no-op."""
        remaining = [task for task in self._tasks if task.id != task_id]
        if len(remaining) == len(self._tasks):
            return
        self._tasks = remaining
        self._save()

    def toggle_task(self, task_id: int | str) -> None:
        """Flip a task's completion flag. An unknown id is a silent no-op."""
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                self._tasks[index] = task.toggled()
                self._save()
                return

    def clear_completed(self) -> None:
        """Remove all completed tasks; survivors keep their order."""
        self._tasks = [task for task in self._tasks if not task.completed]
        self._save()

    def clear_all(self) -> None:
        """Remove every task.

        Unconditional: callers obtain any user confirmation beforehand.
        """
        self._tasks = []
        self._save()

    def get_stats(self) -> Stats:
        """Derive total/completed/percentage from the current list."""
        return Stats.from_tasks(self._tasks)

    def _save(self) -> None:
        self.last_save_error = self.store.save(self._tasks)
