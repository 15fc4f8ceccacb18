"""Tests for task id display and resolution helpers."""

from __future__ import annotations

import pytest

from progress_todo.models import Task
from progress_todo.utils.id_utils import (
    AmbiguousIdError,
    TaskNotFoundError,
    calculate_unique_suffixes,
    resolve_task_id,
    shorten_id,
)


@pytest.fixture()
def tasks():
    return (
        Task(id="abc123", text="one"),
        Task(id="abd456", text="two"),
        Task(id=1700000000000, text="legacy"),
    )


def test_calculate_unique_suffixes():
    assert calculate_unique_suffixes(["abc1", "xyz1", "qqq2"]) == {
        "abc1": 2,
        "xyz1": 2,
        "qqq2": 1,
    }
    assert calculate_unique_suffixes([]) == {}


def test_shorten_id():
    assert shorten_id("0123456789") == "01234567"
    assert shorten_id(42) == "42"


def test_exact_match_wins(tasks):
    assert resolve_task_id(tasks, "abc123") == "abc123"


def test_prefix_and_suffix(tasks):
    assert resolve_task_id(tasks, "abc") == "abc123"
    assert resolve_task_id(tasks, "456") == "abd456"
    assert resolve_task_id(tasks, "#23") == "abc123"


def test_numeric_ids_keep_their_type(tasks):
    assert resolve_task_id(tasks, "1700000000000") == 1700000000000


def test_ambiguous(tasks):
    with pytest.raises(AmbiguousIdError, match="matches 2 tasks"):
        resolve_task_id(tasks, "ab")


@pytest.mark.parametrize("fragment", ["zzz", "", "  "])
def test_not_found(tasks, fragment):
    with pytest.raises(TaskNotFoundError):
        resolve_task_id(tasks, fragment)


def test_ids_that_print_alike_are_ambiguous():
    tasks = (Task(id=5, text="numeric"), Task(id="5", text="text"))
    with pytest.raises(AmbiguousIdError, match="matches 2 tasks"):
        resolve_task_id(tasks, "5")
