"""Tests for the Task and Stats models."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from progress_todo.models import Stats, Task, completion_percentage


class TestTask:
    def test_defaults(self):
        task = Task(text="Buy milk")
        assert task.completed is False
        assert isinstance(task.id, str)
        assert task.created_at.tzinfo is not None

    def test_text_is_trimmed(self):
        assert Task(text="  Buy milk \n").text == "Buy milk"

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_blank_text_is_rejected(self, text):
        with pytest.raises(ValidationError):
            Task(text=text)

    def test_generated_ids_are_distinct(self):
        ids = {Task(text="same tick").id for _ in range(1000)}
        assert len(ids) == 1000

    def test_task_is_immutable(self):
        task = Task(text="Buy milk")
        with pytest.raises(ValidationError):
            task.completed = True

    def test_toggled_returns_flipped_copy(self):
        task = Task(id="a", text="Buy milk")
        done = task.toggled()
        assert done.completed is True
        assert done.id == "a"
        assert done.created_at == task.created_at
        assert task.completed is False
        assert done.toggled().completed is False

    def test_to_record_layout(self):
        task = Task(
            id="a",
            text="Buy milk",
            completed=True,
            created_at=datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC),
        )
        record = task.to_record()
        assert set(record) == {"id", "text", "completed", "createdAt"}
        assert record["id"] == "a"
        assert record["completed"] is True
        assert datetime.fromisoformat(record["createdAt"]) == task.created_at

    def test_accepts_browser_style_record(self):
        task = Task.model_validate(
            {
                "id": 1700000000000,
                "text": "Legacy",
                "completed": False,
                "createdAt": "2023-11-14T22:13:20.000Z",
            }
        )
        assert task.id == 1700000000000
        assert task.created_at == datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC)


class TestCompletionPercentage:
    def test_empty_list_is_zero(self):
        assert completion_percentage(0, 0) == 0

    @pytest.mark.parametrize(
        "completed,total,expected",
        [
            (1, 2, 50),
            (1, 3, 33),
            (2, 3, 67),
            (1, 8, 13),  # 12.5 rounds half-up
            (3, 8, 38),  # 37.5 rounds half-up
            (1, 200, 1),  # 0.5 rounds half-up
            (0, 5, 0),
            (5, 5, 100),
        ],
    )
    def test_rounds_half_up(self, completed, total, expected):
        assert completion_percentage(completed, total) == expected


class TestStats:
    def test_from_tasks(self):
        tasks = [
            Task(id="a", text="a", completed=True),
            Task(id="b", text="b"),
            Task(id="c", text="c"),
        ]
        stats = Stats.from_tasks(tasks)
        assert stats == Stats(total=3, completed=1, percentage=33)
        assert stats.remaining == 2

    def test_from_no_tasks(self):
        assert Stats.from_tasks([]) == Stats(total=0, completed=0, percentage=0)
