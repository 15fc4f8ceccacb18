"""Unit tests for main.py, the CLI entry point."""

from __future__ import annotations

from typer.testing import CliRunner

from progress_todo import __version__
from progress_todo.main import app

runner = CliRunner()


def _invoke(*args):
    return runner.invoke(app, list(args))


def test_help_lists_task_commands():
    result = _invoke("--help")
    assert result.exit_code == 0
    for command in ["add", "list", "toggle", "delete", "clear-completed", "clear-all", "stats", "config"]:
        assert command in result.output


def test_no_args_shows_help():
    result = _invoke()
    assert "Usage" in result.output


def test_version():
    result = _invoke("version")
    assert result.exit_code == 0
    assert __version__ in result.output


def test_end_to_end(patch_config_manager):
    assert _invoke("add", "Buy milk", "-q").exit_code == 0
    assert _invoke("add", "Walk dog", "-q").exit_code == 0
    result = _invoke("list")
    assert "Buy milk" in result.output
    assert "Walk dog" in result.output
    assert "0 / 2" in result.output
