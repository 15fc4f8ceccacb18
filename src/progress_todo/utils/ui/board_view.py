"""Board rendering for the task list.

``render_board`` is a pure function of (tasks, stats); callers print its
result after every mutation.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from progress_todo.models import Stats, Task
from progress_todo.utils.id_utils import calculate_unique_suffixes

EMPTY_STATE_MESSAGE = "No tasks yet. Add one with 'ptodo add <text>'."

CHECKED = "[x]"
UNCHECKED = "[ ]"


def render_progress(stats: Stats) -> RenderableType:
    """Progress bar with percentage and completed/total counts."""
    grid = Table.grid(padding=(0, 1))
    grid.add_column(ratio=1)
    grid.add_column(justify="right", no_wrap=True)
    grid.add_column(justify="right", no_wrap=True)
    grid.add_row(
        ProgressBar(total=100, completed=stats.percentage),
        Text(f"{stats.percentage}%", style="bold cyan"),
        Text(f"{stats.completed} / {stats.total}", style="dim"),
    )
    return grid


def render_task_row(task: Task, short_id: str) -> tuple[Text, Text, Text]:
    """Cells for one task: checkbox, text, short id."""
    if task.completed:
        return (
            Text(CHECKED, style="green"),
            Text(task.text, style="strike dim"),
            Text(short_id, style="dim"),
        )
    return (
        Text(UNCHECKED),
        Text(task.text),
        Text(short_id, style="dim"),
    )


def render_task_table(tasks: Sequence[Task]) -> RenderableType:
    ids = [str(task.id) for task in tasks]
    suffix_lengths = calculate_unique_suffixes(ids)

    table = Table(show_header=False, box=None, pad_edge=False, expand=True)
    table.add_column("done", no_wrap=True, width=3)
    table.add_column("text", ratio=1)
    table.add_column("id", justify="right", no_wrap=True)
    for task, task_id in zip(tasks, ids):
        table.add_row(*render_task_row(task, task_id[-suffix_lengths[task_id]:]))
    return table


def render_board(
    tasks: Sequence[Task], stats: Stats, title: str = "Tasks"
) -> RenderableType:
    """Render the task list and its progress as one renderable.

    Args:
        tasks: Tasks to show, in display order
        stats: Statistics for the whole list (not only the shown tasks)
        title: Panel title

    Returns:
        A Rich renderable; shows an empty-state message when there are no tasks
    """
    if tasks:
        body: RenderableType = render_task_table(tasks)
    else:
        body = Text(EMPTY_STATE_MESSAGE, style="italic dim")
    return Panel(
        Group(render_progress(stats), Text(""), body),
        title=title,
        title_align="left",
    )
