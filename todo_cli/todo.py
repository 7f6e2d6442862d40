"""Todo operations and formatting.

Every operation reads the current collection from the store first and never
keeps a copy between calls. Mutating operations finish with exactly one
``store.set()`` carrying the whole updated collection, and only after every
lookup has succeeded, so a failed command leaves the store untouched.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from todo_cli.errors import not_found
from todo_cli.models import Todo
from todo_cli.store import TodoStore
from todo_cli.validate import to_number

logger = logging.getLogger(__name__)


def format_todo(todo: Todo) -> str:
    """Render a todo as ``"<id> - [x] <title>"`` (space instead of x when open)."""
    return f"{todo.id} - [{'x' if todo.done else ' '}] {todo.title}"


def format_list(todos: List[Todo]) -> List[str]:
    return [format_todo(todo) for todo in todos]


def next_id(todos: List[Todo]) -> int:
    """Compute the id for a new todo.

    Uses the maximum existing id rather than the count, so ids freed by
    deletion are never handed out again.
    """
    if not todos:
        return 1
    return max(todo.id for todo in todos) + 1


def _index_of(todos: List[Todo], todo_id: Any) -> int:
    number = to_number(todo_id)
    for index, todo in enumerate(todos):
        if todo.id == number:
            return index
    raise not_found(todo_id)


def list_todos(store: TodoStore) -> List[Todo]:
    return store.get()


def add(store: TodoStore, title: str) -> Todo:
    """Create a todo with the next free id and append it to the store.

    Args:
        store: Storage handle holding the collection
        title: Title of the new todo

    Returns:
        The newly created todo
    """
    todos = store.get()
    new_todo = Todo(id=next_id(todos), title=title, done=False, labels=[])
    store.set([*todos, new_todo])
    logger.debug(f"Added todo {new_todo.id}: {title!r}")
    return new_todo


def find_by_id(store: TodoStore, todo_id: Any) -> Todo:
    """Look up a todo by id.

    Args:
        store: Storage handle holding the collection
        todo_id: Numeric id, or a string holding one

    Returns:
        The matching todo

    Raises:
        AppError: If the id is not numeric or no todo has it
    """
    todos = store.get()
    return todos[_index_of(todos, todo_id)]


def find_by_title(store: TodoStore, title: str) -> Optional[Todo]:
    """Return the first todo whose title matches exactly, or None.

    A miss is not an error here, unlike ``find_by_id``.
    """
    for todo in store.get():
        if todo.title == title:
            return todo
    return None


def find_by_status(store: TodoStore, status: str) -> List[Todo]:
    want_done = status == "done"
    return [todo for todo in store.get() if todo.done == want_done]


def complete_todo(store: TodoStore, todo_id: Any) -> Todo:
    """Mark a todo as done. Completing an already done todo changes nothing."""
    todos = store.get()
    todo = todos[_index_of(todos, todo_id)]
    todo.done = True
    store.set(todos)
    logger.debug(f"Completed todo {todo.id}")
    return todo


def edit_todo_title(store: TodoStore, todo_id: Any, title: str) -> Todo:
    todos = store.get()
    todo = todos[_index_of(todos, todo_id)]
    old_title = todo.title
    todo.title = title
    store.set(todos)
    logger.debug(f"Renamed todo {todo.id}: {old_title!r} -> {title!r}")
    return todo


def add_label(store: TodoStore, todo_id: Any, label: str) -> Todo:
    """Attach a label to a todo unless it already carries it.

    The store is written even when the label was already present.

    Returns:
        The todo, updated or unchanged
    """
    todos = store.get()
    todo = todos[_index_of(todos, todo_id)]
    if todo.has_label(label):
        logger.debug(f"Todo {todo.id} already labelled {label!r}")
    else:
        todo.labels.append(label)
        logger.debug(f"Labelled todo {todo.id} with {label!r}")
    store.set(todos)
    return todo


def delete_todo(store: TodoStore, todo_id: Any) -> None:
    todos = store.get()
    index = _index_of(todos, todo_id)
    removed = todos[index]
    store.set(todos[:index] + todos[index + 1 :])
    logger.debug(f"Deleted todo {removed.id}: {removed.title!r}")
