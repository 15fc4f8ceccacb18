"""progress-todo: a task list manager with persistent completion progress."""

__version__ = "0.1.0"
