"""Task list commands: add, list, toggle, delete, clear, stats."""

import contextlib
from collections.abc import Iterator

import typer
from rich.prompt import Confirm

from progress_todo.config import get_config_manager
from progress_todo.services import TaskManager
from progress_todo.services.factory import create_task_manager
from progress_todo.utils.exit_codes import (
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    ERROR_STORAGE,
)
from progress_todo.utils.id_utils import (
    AmbiguousIdError,
    TaskNotFoundError,
    resolve_task_id,
)
from progress_todo.utils.logger import get_logger
from progress_todo.utils.ui.board_view import render_board
from progress_todo.utils.ui.console import get_console
from progress_todo.utils.ui.formatters import (
    format_info,
    format_json,
    format_success,
    format_warning,
    tasks_to_json,
)

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Task list commands")
console = get_console()

PROFILE_HELP = "Profile name (each profile keeps its own task list)"


@contextlib.contextmanager
def open_task_manager(profile: str) -> Iterator[TaskManager]:
    """Build a TaskManager for a profile and release its storage afterwards."""
    config_manager = get_config_manager(profile)
    get_logger(config_manager.config.logging.level)
    manager = create_task_manager(config_manager)
    try:
        yield manager
    finally:
        manager.store.storage.close()


def _resolve(manager: TaskManager, fragment: str) -> int | str:
    try:
        return resolve_task_id(manager.tasks, fragment)
    except TaskNotFoundError as e:
        raise AppError(str(e), exit_code=ERROR_NOT_FOUND) from e
    except AmbiguousIdError as e:
        raise AppError(str(e), exit_code=ERROR_INVALID_ARGS) from e


def _show(manager: TaskManager, quiet: bool = False) -> None:
    """Report a failed save, then re-render the board."""
    if manager.last_save_error is not None:
        format_warning(
            f"Changes could not be saved and will be lost on exit: "
            f"{manager.last_save_error}"
        )
    if not quiet:
        console.print(render_board(manager.tasks, manager.get_stats()))


@app.command("add")
@command_wrapper
def add(
    text: list[str] = typer.Argument(..., help="Task text"),
    profile: str = typer.Option("default", "--profile", help=PROFILE_HELP),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not show the board"),
) -> None:
    """Add a task."""
    with open_task_manager(profile) as manager:
        task = manager.add_task(" ".join(text))
        if task is None:
            raise AppError("Task text is required", exit_code=ERROR_INVALID_ARGS)
        _show(manager, quiet)


@app.command("list")
@command_wrapper
def list_tasks(
    task_filter: str = typer.Option(
        "all", "--filter", "-f", help="Which tasks to show: all, active, completed"
    ),
    profile: str = typer.Option("default", "--profile", help=PROFILE_HELP),
    json_opt: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the task list with its progress."""
    if task_filter not in ("all", "active", "completed"):
        raise AppError(
            f"Unknown filter '{task_filter}' (use all, active or completed)",
            exit_code=ERROR_INVALID_ARGS,
        )
    with open_task_manager(profile) as manager:
        tasks = manager.list_tasks(task_filter)  # type: ignore[arg-type]
        stats = manager.get_stats()
        output = get_config_manager(profile).config.output.format
        if json_opt or output == "json":
            format_json(tasks_to_json(tasks, stats))
            return
        title = "Tasks" if task_filter == "all" else f"Tasks ({task_filter})"
        console.print(render_board(tasks, stats, title=title))


@app.command("toggle")
@command_wrapper
def toggle(
    task_id: str = typer.Argument(..., help="Task ID, prefix or displayed suffix"),
    profile: str = typer.Option("default", "--profile", help=PROFILE_HELP),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not show the board"),
) -> None:
    """Mark a task complete, or incomplete again."""
    with open_task_manager(profile) as manager:
        manager.toggle_task(_resolve(manager, task_id))
        _show(manager, quiet)


@app.command("delete")
@command_wrapper
def delete(
    task_id: str = typer.Argument(..., help="Task ID, prefix or displayed suffix"),
    profile: str = typer.Option("default", "--profile", help=PROFILE_HELP),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not show the board"),
) -> None:
    """Delete a task."""
    with open_task_manager(profile) as manager:
        manager.delete_task(_resolve(manager, task_id))
        _show(manager, quiet)


@app.command("clear-completed")
@command_wrapper
def clear_completed(
    profile: str = typer.Option("default", "--profile", help=PROFILE_HELP),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not show the board"),
) -> None:
    """Delete all completed tasks."""
    with open_task_manager(profile) as manager:
        if not manager.has_completed:
            format_info("No completed tasks to clear")
            return
        removed = manager.get_stats().completed
        manager.clear_completed()
        format_success(f"Cleared {removed} completed task(s)")
        _show(manager, quiet)


@app.command("clear-all")
@command_wrapper
def clear_all(
    profile: str = typer.Option("default", "--profile", help=PROFILE_HELP),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not show the board"),
) -> None:
    """Delete every task."""
    with open_task_manager(profile) as manager:
        if not yes and not Confirm.ask(
            "Do you really want to delete all tasks?", default=False
        ):
            format_info("Cancelled")
            return
        manager.clear_all()
        _show(manager, quiet)


@app.command("stats")
@command_wrapper
def stats(
    profile: str = typer.Option("default", "--profile", help=PROFILE_HELP),
    json_opt: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show completion statistics."""
    with open_task_manager(profile) as manager:
        result = manager.get_stats()
    if json_opt:
        format_json(result.model_dump())
        return
    console.print(
        f"[bold]{result.percentage}%[/bold] complete "
        f"([green]{result.completed}[/green] of {result.total}, "
        f"{result.remaining} remaining)"
    )


@app.command("reset")
@command_wrapper
def reset(
    profile: str = typer.Option("default", "--profile", help=PROFILE_HELP),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
) -> None:
    """Remove the stored task list, including unreadable data."""
    if not yes and not Confirm.ask(
        "Remove the stored task list for this profile?", default=False
    ):
        format_info("Cancelled")
        return
    with open_task_manager(profile) as manager:
        error = manager.store.clear()
    if error is not None:
        raise AppError(f"Failed to reset storage: {error}", exit_code=ERROR_STORAGE)
    format_success(f"Storage for profile '{profile}' reset")
