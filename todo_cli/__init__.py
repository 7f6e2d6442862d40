"""Command-line todo-list manager with pluggable storage."""

from todo_cli.errors import AppError
from todo_cli.models import Todo
from todo_cli.store import InMemoryTodoStore, JsonFileTodoStore, TodoStore
from todo_cli.app import create_app, run_command
from todo_cli.registry import Command, CommandRegistry

__all__ = [
    "AppError",
    "Todo",
    "TodoStore",
    "InMemoryTodoStore",
    "JsonFileTodoStore",
    "Command",
    "CommandRegistry",
    "create_app",
    "run_command",
]
