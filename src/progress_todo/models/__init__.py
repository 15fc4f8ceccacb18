"""progress-todo domain models.

Pydantic models for the task list and its derived statistics.
"""

from .task import (
    Stats,
    Task,
    TaskFilter,
    completion_percentage,
    generate_task_id,
)

__all__ = [
    "Task",
    "Stats",
    "TaskFilter",
    "completion_percentage",
    "generate_task_id",
]
