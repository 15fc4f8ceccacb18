"""Main entry point for progress-todo."""

import typer

from progress_todo import __version__
from progress_todo.commands import config, tasks
from progress_todo.utils.ui.console import get_console

app = typer.Typer(
    name="ptodo",
    help="A task list with persistent completion progress",
    no_args_is_help=True,
)

console = get_console()

# Task commands live at the top level: `ptodo add`, `ptodo list`, ...
app.registered_commands.extend(tasks.app.registered_commands)
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]progress-todo[/bold] version [cyan]{__version__}[/cyan]")


def main() -> None:
    """Entry point for the console script."""
    app()


if __name__ == "__main__":
    main()
