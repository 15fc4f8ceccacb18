"""Storage interfaces for progress-todo.

These are the "Ports" in the Hexagonal Architecture. Implementations
(Adapters) are in:
- progress_todo.adapters.sqlite (local database file)
- progress_todo.adapters.memory (process memory, optional quota)
"""

from .repository import KeyValueStorage

__all__ = [
    "KeyValueStorage",
]
