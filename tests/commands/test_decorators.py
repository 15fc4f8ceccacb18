"""Unit tests for command decorators."""

import pytest
import typer

from progress_todo.commands.decorators import AppError, command_wrapper


def test_passes_result_through():
    @command_wrapper
    def ok():
        return 42

    assert ok() == 42


def test_app_error_becomes_exit_code(capsys):
    @command_wrapper
    def failing():
        raise AppError("bad input", exit_code=2)

    with pytest.raises(typer.Exit) as exc_info:
        failing()
    assert exc_info.value.exit_code == 2
    assert "bad input" in capsys.readouterr().out


def test_unexpected_error_exits_one(isolate_logging):
    @command_wrapper
    def crashing():
        raise RuntimeError("boom")

    with pytest.raises(typer.Exit) as exc_info:
        crashing()
    assert exc_info.value.exit_code == 1

    log = (isolate_logging / "progress_todo.log").read_text(encoding="utf-8")
    assert "command failed: crashing" in log
    assert "RuntimeError: boom" in log


def test_typer_exit_is_reraised():
    @command_wrapper
    def exiting():
        raise typer.Exit(0)

    with pytest.raises(typer.Exit):
        exiting()


def test_keeps_function_metadata():
    @command_wrapper
    def documented():
        """Docstring."""

    assert documented.__name__ == "documented"
    assert documented.__doc__ == "Docstring."
