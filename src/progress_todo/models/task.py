"""Task data models."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

TaskFilter = Literal["all", "active", "completed"]


def generate_task_id() -> str:
    """Generate a new task id.

    Random UUID4 strings, so ids created within the same clock tick never
    collide.
    """
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(UTC)


class Task(BaseModel):
    """A single to-do item.

    Tasks are immutable; toggling produces an updated copy.

    Attributes:
        id: Unique identifier (UUID string; numeric ids from older data are kept)
        text: Non-empty, trimmed task text
        completed: Completion status
        created_at: Creation timestamp, persisted as ``createdAt``
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int | str = Field(default_factory=generate_task_id)
    text: str
    completed: bool = False
    created_at: datetime = Field(default_factory=utc_now, alias="createdAt")

    @field_validator("text")
    @classmethod
    def text_must_not_be_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("task text must not be empty")
        return value

    def toggled(self) -> Task:
        """Return a copy with the completion flag flipped."""
        return self.model_copy(update={"completed": not self.completed})

    def to_record(self) -> dict:
        """Serialize to the persisted record layout."""
        return self.model_dump(mode="json", by_alias=True)


class Stats(BaseModel):
    """Aggregate completion statistics derived from a task list.

    ``percentage`` is rounded half-up: 1 of 8 (12.5%) reports 13.
    """

    model_config = ConfigDict(frozen=True)

    total: int = 0
    completed: int = 0
    percentage: int = Field(default=0, ge=0, le=100)

    @property
    def remaining(self) -> int:
        return self.total - self.completed

    @classmethod
    def from_tasks(cls, tasks) -> Stats:
        total = 0
        completed = 0
        for task in tasks:
            total += 1
            if task.completed:
                completed += 1
        return cls(
            total=total,
            completed=completed,
            percentage=completion_percentage(completed, total),
        )


def completion_percentage(completed: int, total: int) -> int:
    """Integer percentage of completed tasks, rounded half-up.

    Returns 0 for an empty list.
    """
    if total == 0:
        return 0
    # floor(100 * completed / total + 0.5) without floating point
    return (200 * completed + total) // (2 * total)
