"""Command registry for the todo dispatcher.

Each command name maps to a ``Command`` bundling three steps:

    validate(raw_params) -> typed parameter model
    execute(store, params) -> operation result
    render(result) -> list of display lines

The dispatcher only looks commands up here, so adding a command means
registering it rather than growing a conditional.

Usage:
    command = CommandRegistry.get_command("add")
    params = command.validate(["Buy milk"])
    lines = command.render(command.execute(store, params))

    # Register a custom command
    CommandRegistry.register(Command(name="count", ...))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

import pydantic as pd

from todo_cli import todo as ops
from todo_cli import validate as v
from todo_cli.errors import AppError
from todo_cli.models import (
    EditTitleParams,
    IdParams,
    LabelParams,
    NoParams,
    StatusParams,
    Todo,
    TitleParams,
)
from todo_cli.store import TodoStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Command:
    """A dispatchable command.

    Attributes:
        name: Name typed on the command line
        validate: Checks raw string arguments and builds the typed parameters
        execute: Runs the operation against a store
        render: Turns the operation result into display lines
        usage: Argument synopsis shown in help output
        summary: One-line description shown in help output
    """

    name: str
    validate: Callable[[Sequence[Any]], pd.BaseModel]
    execute: Callable[[TodoStore, Any], Any]
    render: Callable[[Any], List[str]]
    usage: str = ""
    summary: str = ""


class CommandRegistry:
    """Registry of dispatchable commands.

    Default commands are registered at module import time.

    Thread-safety: This class uses class-level state and is not thread-safe.
    """

    _registry: Dict[str, Command] = {}

    @classmethod
    def register(cls, command: Command) -> None:
        """Register a command.

        Raises:
            ValueError: If a command with the same name is already registered
        """
        if command.name in cls._registry:
            raise ValueError(f"Command '{command.name}' already registered")
        cls._registry[command.name] = command

    @classmethod
    def unregister(cls, name: str) -> None:
        cls._registry.pop(name, None)

    @classmethod
    def get_command(cls, name: Optional[str]) -> Command:
        """Get command by name.

        Raises:
            AppError: If no command is registered under that name
        """
        if not name:
            raise AppError(
                f"No command given. Available commands: {', '.join(cls._registry.keys())}"
            )
        if name not in cls._registry:
            raise AppError(f"Unknown command: {name}")
        return cls._registry[name]

    @classmethod
    def get_all_names(cls) -> List[str]:
        return list(cls._registry.keys())

    @classmethod
    def get_all_commands(cls) -> List[Command]:
        return list(cls._registry.values())


def _render_found(prefix: str) -> Callable[[Todo], List[str]]:
    def render(todo: Todo) -> List[str]:
        return [prefix, ops.format_todo(todo)]

    return render


def _validate_list(params: Sequence[Any]) -> NoParams:
    return NoParams()


def _render_list(todos: List[Todo]) -> List[str]:
    return [*ops.format_list(todos), f"You have {len(todos)} todos."]


def _validate_add(params: Sequence[Any]) -> TitleParams:
    (title,) = v.validate_add_params(params)
    return TitleParams(title=title)


def _validate_find_by_id(params: Sequence[Any]) -> IdParams:
    validated = v.validate_find_by_id_param(params)
    return IdParams(id=validated[0])


def _validate_find_by_title(params: Sequence[Any]) -> TitleParams:
    validated = v.validate_find_by_title_param(params)
    return TitleParams(title=validated[0])


def _render_find_by_title(todo: Optional[Todo]) -> List[str]:
    if todo is None:
        return ["No todo found with that title."]
    return ["Todo found:", ops.format_todo(todo)]


def _validate_find_by_status(params: Sequence[Any]) -> StatusParams:
    return StatusParams(status=v.validate_status_param(params))


def _execute_find_by_status(store: TodoStore, params: StatusParams) -> Dict[str, Any]:
    return {"status": params.status, "todos": ops.find_by_status(store, params.status)}


def _render_find_by_status(result: Dict[str, Any]) -> List[str]:
    todos = result["todos"]
    return [*ops.format_list(todos), f"You have {len(todos)} {result['status']} todos."]


def _validate_complete(params: Sequence[Any]) -> IdParams:
    (todo_id,) = v.validate_complete_todo_param(list(params))
    return IdParams(id=todo_id)


def _validate_edit_title(params: Sequence[Any]) -> EditTitleParams:
    todo_id, title = v.validate_edit_title_params(params)
    return EditTitleParams(id=todo_id, title=title)


def _validate_delete(params: Sequence[Any]) -> IdParams:
    (todo_id,) = v.validate_delete_todo_params(params)
    return IdParams(id=todo_id)


def _validate_add_label(params: Sequence[Any]) -> LabelParams:
    todo_id, label = v.validate_add_label_params(params)
    return LabelParams(id=todo_id, label=label)


def _render_add_label(todo: Todo) -> List[str]:
    return ["Label added:", ops.format_todo(todo), f"Labels: {', '.join(todo.labels)}"]


def _register_default_commands() -> None:
    """Register the built-in commands at module import time."""
    CommandRegistry.register(
        Command(
            name="list",
            validate=_validate_list,
            execute=lambda store, params: ops.list_todos(store),
            render=_render_list,
            summary="List all todos.",
        )
    )
    CommandRegistry.register(
        Command(
            name="add",
            validate=_validate_add,
            execute=lambda store, params: ops.add(store, params.title),
            render=_render_found("New Todo added:"),
            usage="<title>",
            summary="Add a new todo.",
        )
    )
    CommandRegistry.register(
        Command(
            name="find-by-id",
            validate=_validate_find_by_id,
            execute=lambda store, params: ops.find_by_id(store, params.id),
            render=_render_found("Find by id: "),
            usage="<id>",
            summary="Show the todo with the given id.",
        )
    )
    CommandRegistry.register(
        Command(
            name="find-by-title",
            validate=_validate_find_by_title,
            execute=lambda store, params: ops.find_by_title(store, params.title),
            render=_render_find_by_title,
            usage="<title>",
            summary="Show the first todo with exactly this title.",
        )
    )
    CommandRegistry.register(
        Command(
            name="find-by-status",
            validate=_validate_find_by_status,
            execute=_execute_find_by_status,
            render=_render_find_by_status,
            usage="<done|not-done>",
            summary="List todos that are done or not done.",
        )
    )
    CommandRegistry.register(
        Command(
            name="complete",
            validate=_validate_complete,
            execute=lambda store, params: ops.complete_todo(store, params.id),
            render=_render_found("Todo completed:"),
            usage="<id>",
            summary="Mark a todo as done.",
        )
    )
    CommandRegistry.register(
        Command(
            name="edit-title",
            validate=_validate_edit_title,
            execute=lambda store, params: ops.edit_todo_title(store, params.id, params.title),
            render=_render_found("Todo title edited:"),
            usage="<id> <new title>",
            summary="Change the title of a todo.",
        )
    )
    CommandRegistry.register(
        Command(
            name="delete",
            validate=_validate_delete,
            execute=lambda store, params: ops.delete_todo(store, params.id),
            render=lambda result: ["Deletion completed"],
            usage="<id>",
            summary="Delete a todo.",
        )
    )
    CommandRegistry.register(
        Command(
            name="add-label",
            validate=_validate_add_label,
            execute=lambda store, params: ops.add_label(store, params.id, params.label),
            render=_render_add_label,
            usage="<id> <label>",
            summary="Attach a label to a todo.",
        )
    )


_register_default_commands()
