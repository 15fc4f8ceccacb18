"""Task id utility functions.

Provides short id display and resolution of what the user typed (full id,
prefix, or displayed suffix) to a task id.
"""

from __future__ import annotations

from collections.abc import Sequence

from progress_todo.models import Task


class AmbiguousIdError(ValueError):
    """Raised when an id fragment matches more than one task."""


class TaskNotFoundError(ValueError):
    """Raised when an id fragment matches no task."""


def calculate_unique_suffixes(task_ids: list[str]) -> dict[str, int]:
    """
    Calculate minimum unique suffix length for each task ID.

    Starts from length 1 and grows until unique among all IDs.

    Args:
        task_ids: List of full task IDs

    Returns:
        Dict mapping task_id -> required suffix length
    """
    result = {}

    for task_id in task_ids:
        for length in range(1, len(task_id) + 1):
            suffix = task_id[-length:]
            conflicts = [
                tid for tid in task_ids if tid != task_id and tid.endswith(suffix)
            ]
            if not conflicts:
                result[task_id] = length
                break
        else:
            result[task_id] = len(task_id)

    return result


def shorten_id(task_id: int | str, length: int = 8) -> str:
    """First N characters of an id, for error messages."""
    return str(task_id)[:length]


def resolve_task_id(tasks: Sequence[Task], fragment: str) -> int | str:
    """Resolve a full id, id prefix, or displayed suffix to a task id.

    An exact match wins unless two ids print the same. Otherwise prefixes and suffixes are both tried and
    must point at exactly one task.

    Args:
        tasks: Tasks to search
        fragment: What the user typed

    Returns:
        The matching task's id, with its original type

    Raises:
        TaskNotFoundError: If nothing matches
        AmbiguousIdError: If several tasks match
    """
    needle = fragment.strip().lower().lstrip("#")
    if not needle:
        raise TaskNotFoundError("Task id must not be empty")

    exact = [task for task in tasks if str(task.id).lower() == needle]
    if len(exact) == 1:
        return exact[0].id
    if len(exact) > 1:
        raise AmbiguousIdError(
            f"Ambiguous ID '{fragment}' matches {len(exact)} tasks"
        )

    matches = [
        task
        for task in tasks
        if str(task.id).lower().startswith(needle)
        or str(task.id).lower().endswith(needle)
    ]
    if not matches:
        raise TaskNotFoundError(f"Task not found: {fragment}")
    if len(matches) > 1:
        shown = ", ".join(shorten_id(t.id) for t in matches[:5])
        if len(matches) > 5:
            shown += f", ... ({len(matches)} total)"
        raise AmbiguousIdError(
            f"Ambiguous ID '{fragment}' matches {len(matches)} tasks: {shown}"
        )
    return matches[0].id
