"""Domain error raised for every validation and lookup failure."""

from __future__ import annotations


class AppError(Exception):
    """Single error kind for todo-cli.

    The message is shown to the user verbatim, so it is kept as-is on
    ``message`` and returned unchanged by ``str()``.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def not_found(todo_id: object) -> AppError:
    """Build the error used by every lookup that misses."""
    return AppError(f"Todo with id: {todo_id}, is not found!")
