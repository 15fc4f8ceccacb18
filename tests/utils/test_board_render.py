"""Tests for the board renderer."""

from __future__ import annotations

from rich.console import Console

from progress_todo.models import Stats, Task
from progress_todo.utils.ui.board_view import (
    CHECKED,
    EMPTY_STATE_MESSAGE,
    UNCHECKED,
    render_board,
)


def _render(renderable) -> str:
    console = Console(width=100, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_empty_board_shows_empty_state():
    text = _render(render_board((), Stats()))
    assert EMPTY_STATE_MESSAGE in text
    assert "0%" in text
    assert "0 / 0" in text


def test_board_lists_tasks_with_progress():
    tasks = (
        Task(id="aaaa1", text="Buy milk", completed=True),
        Task(id="bbbb2", text="Walk dog"),
    )
    text = _render(render_board(tasks, Stats.from_tasks(tasks)))

    assert "50%" in text
    assert "1 / 2" in text
    assert "Buy milk" in text
    assert "Walk dog" in text
    assert CHECKED in text
    assert UNCHECKED in text
    assert EMPTY_STATE_MESSAGE not in text


def test_board_shows_unique_suffixes():
    tasks = (Task(id="xx11", text="one"), Task(id="yy21", text="two"))
    text = _render(render_board(tasks, Stats.from_tasks(tasks)))
    assert "11" in text
    assert "21" in text


def test_render_is_pure():
    tasks = (Task(id="a", text="one"),)
    stats = Stats.from_tasks(tasks)
    assert _render(render_board(tasks, stats)) == _render(render_board(tasks, stats))
