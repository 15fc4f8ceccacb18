"""Output formatters for messages and machine-readable output."""

import json
from typing import Any

from progress_todo.models import Stats, Task

from .console import get_console


def format_json(data: Any) -> None:
    """Print data as indented JSON."""
    print(json.dumps(data, indent=2, default=str, ensure_ascii=False))


def tasks_to_json(tasks: tuple[Task, ...] | list[Task], stats: Stats) -> dict[str, Any]:
    """Build the JSON document printed by ``list --json``."""
    return {
        "tasks": [task.to_record() for task in tasks],
        "stats": stats.model_dump(),
    }


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    get_console().print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    get_console().print(f"[bold blue]Info:[/bold blue] {message}")
