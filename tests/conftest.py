"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real platform directories.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from unittest.mock import patch

import pytest

from progress_todo.adapters import InMemoryKeyValueStorage
from progress_todo.config import ConfigManager, reset_config_manager
from progress_todo.services import PersistentStore, TaskManager


# ---------------------------------------------------------------------------
# Logging isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolate_logging(tmp_path):
    """Send the application log file into tmp_path and reset it afterwards."""
    from progress_todo.utils.logger import reset_logger

    reset_logger()
    log_dir = tmp_path / "logs"
    with patch("progress_todo.utils.logger.user_log_dir", return_value=str(log_dir)):
        yield log_dir
    reset_logger()


# ---------------------------------------------------------------------------
# Config isolation helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def config_manager(tmp_path):
    """A real ConfigManager whose files live under tmp_path."""
    return ConfigManager(
        profile="default",
        config_dir=tmp_path / "config",
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def patch_config_manager(config_manager):
    """Make every command use the tmp_path-backed ConfigManager."""
    reset_config_manager()
    with patch(
        "progress_todo.commands.tasks.get_config_manager", return_value=config_manager
    ):
        with patch(
            "progress_todo.commands.config.get_config_manager",
            return_value=config_manager,
        ):
            yield config_manager
    reset_config_manager()


# ---------------------------------------------------------------------------
# Core objects
# ---------------------------------------------------------------------------


@pytest.fixture()
def storage():
    return InMemoryKeyValueStorage()


@pytest.fixture()
def store(storage):
    return PersistentStore(storage)


class SequentialIds:
    """Deterministic id factory: task-1, task-2, ..."""

    def __init__(self):
        self.count = 0

    def __call__(self) -> str:
        self.count += 1
        return f"task-{self.count}"


class FrozenClock:
    """Clock that advances one second per call."""

    def __init__(self, start: datetime | None = None):
        self.current = start or datetime(2024, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


@pytest.fixture()
def manager(store):
    return TaskManager(store, id_factory=SequentialIds(), clock=FrozenClock())
