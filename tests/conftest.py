"""Shared pytest fixtures for todo-cli tests."""

from typing import List
from unittest.mock import Mock

import pytest

from todo_cli.models import Todo
from todo_cli.store import InMemoryTodoStore


@pytest.fixture
def make_store():
    """Fixture factory for spy stores.

    Usage:
        def test_example(make_store):
            store = make_store([Todo(id=1, title="a")])
            ...
            store.set.assert_called_once_with(...)

    Returns:
        Factory creating a Mock whose ``get`` always returns the given list
    """

    def _create_store(todos: List[Todo]) -> Mock:
        store = Mock()
        store.get.return_value = todos
        return store

    return _create_store


@pytest.fixture
def sample_todos() -> List[Todo]:
    """Two open todos and one done todo with a label."""
    return [
        Todo(id=1, title="Read a book.", done=False),
        Todo(id=2, title="Do the dishes.", done=True, labels=["home"]),
        Todo(id=3, title="Water the plants", done=False),
    ]


@pytest.fixture
def memory_store(sample_todos: List[Todo]) -> InMemoryTodoStore:
    return InMemoryTodoStore(sample_todos)


@pytest.fixture
def empty_store() -> InMemoryTodoStore:
    return InMemoryTodoStore()
