"""Tests for todo operations and formatting."""

import pytest

from todo_cli.errors import AppError
from todo_cli.models import Todo
from todo_cli.store import InMemoryTodoStore
from todo_cli.todo import (
    add,
    add_label,
    complete_todo,
    delete_todo,
    edit_todo_title,
    find_by_id,
    find_by_status,
    find_by_title,
    format_list,
    format_todo,
    list_todos,
    next_id,
)


class TestFormat:
    def test_formats_open_todo(self):
        assert format_todo(Todo(id=1, title="Buy milk")) == "1 - [ ] Buy milk"

    def test_formats_done_todo(self):
        assert format_todo(Todo(id=2, title="Buy milk", done=True)) == "2 - [x] Buy milk"

    def test_format_list_preserves_order(self, sample_todos):
        assert format_list(sample_todos) == [
            "1 - [ ] Read a book.",
            "2 - [x] Do the dishes.",
            "3 - [ ] Water the plants",
        ]

    def test_format_list_empty(self):
        assert format_list([]) == []


class TestList:
    def test_returns_stored_todos(self, sample_todos, make_store):
        store = make_store(sample_todos)
        assert list_todos(store) is sample_todos
        store.set.assert_not_called()

    def test_empty_store(self, make_store):
        assert list_todos(make_store([])) == []


class TestAdd:
    def test_add_to_empty_store(self, make_store):
        store = make_store([])
        added = add(store, "Buy milk")
        expected = Todo(id=1, title="Buy milk", done=False, labels=[])
        assert added == expected
        store.set.assert_called_once_with([expected])

    def test_appends_to_existing(self, sample_todos, make_store):
        store = make_store(sample_todos)
        added = add(store, "New one")
        assert added.id == 4
        stored = store.set.call_args[0][0]
        assert stored[:3] == sample_todos
        assert stored[3] == added

    def test_ids_are_sequential_on_empty_store(self):
        store = InMemoryTodoStore()
        ids = [add(store, f"Todo {n}").id for n in range(5)]
        assert ids == [1, 2, 3, 4, 5]

    def test_id_uses_max_not_count(self, make_store):
        store = make_store([Todo(id=2, title="a"), Todo(id=4, title="b")])
        assert add(store, "c").id == 5

    def test_deleted_ids_are_not_reused(self):
        store = InMemoryTodoStore()
        add(store, "first")
        add(store, "second")
        delete_todo(store, 2)
        assert add(store, "third").id == 3

    def test_next_id(self):
        assert next_id([]) == 1
        assert next_id([Todo(id=7, title="x"), Todo(id=3, title="y")]) == 8


class TestFindById:
    def test_returns_matching_todo(self, sample_todos, make_store):
        store = make_store(sample_todos)
        assert find_by_id(store, "2") is sample_todos[1]
        assert find_by_id(store, 3) is sample_todos[2]
        store.set.assert_not_called()

    def test_missing_id_raises_not_found(self, sample_todos, make_store):
        store = make_store(sample_todos)
        with pytest.raises(AppError) as exc_info:
            find_by_id(store, 9)
        assert str(exc_info.value) == "Todo with id: 9, is not found!"

    def test_non_numeric_id_raises(self, sample_todos, make_store):
        with pytest.raises(AppError, match="Id is not a number"):
            find_by_id(make_store(sample_todos), "abc")


class TestFindByTitle:
    def test_finds_exact_title(self, sample_todos, make_store):
        store = make_store(sample_todos)
        assert find_by_title(store, "Do the dishes.") is sample_todos[1]

    def test_match_is_case_sensitive(self, sample_todos, make_store):
        assert find_by_title(make_store(sample_todos), "do the dishes.") is None

    def test_returns_first_match(self, make_store):
        todos = [Todo(id=1, title="same"), Todo(id=2, title="same")]
        assert find_by_title(make_store(todos), "same").id == 1

    def test_no_match_returns_none(self, sample_todos, make_store):
        assert find_by_title(make_store(sample_todos), "Nothing here") is None

    def test_empty_store_returns_none(self, make_store):
        assert find_by_title(make_store([]), "anything") is None


class TestFindByStatus:
    def test_done(self, sample_todos, make_store):
        result = find_by_status(make_store(sample_todos), "done")
        assert [t.id for t in result] == [2]

    def test_not_done(self, sample_todos, make_store):
        result = find_by_status(make_store(sample_todos), "not-done")
        assert [t.id for t in result] == [1, 3]

    def test_empty_result(self, make_store):
        todos = [Todo(id=1, title="a"), Todo(id=2, title="b")]
        assert find_by_status(make_store(todos), "done") == []


class TestCompleteTodo:
    def test_marks_done_and_persists(self, sample_todos, make_store):
        store = make_store(sample_todos)
        completed = complete_todo(store, 1)
        assert completed.done is True
        store.set.assert_called_once_with(sample_todos)
        assert store.set.call_args[0][0][0].done is True

    def test_is_idempotent(self, sample_todos):
        store = InMemoryTodoStore(sample_todos)
        first = complete_todo(store, 1)
        second = complete_todo(store, 1)
        assert first.done is True and second.done is True
        assert len(store.get()) == 3

    def test_missing_id_raises_not_found(self, sample_todos, make_store):
        store = make_store(sample_todos)
        with pytest.raises(AppError) as exc_info:
            complete_todo(store, 9)
        assert str(exc_info.value) == "Todo with id: 9, is not found!"
        store.set.assert_not_called()


class TestEditTodoTitle:
    def test_edits_title(self, make_store):
        todos = [Todo(id=1, title="Todo 1")]
        store = make_store(todos)
        edited = edit_todo_title(store, 1, "edited title")
        assert edited == Todo(id=1, title="edited title")
        store.set.assert_called_once_with([Todo(id=1, title="edited title")])

    def test_missing_id_raises_not_found(self, make_store):
        store = make_store([Todo(id=1, title="Todo 1")])
        with pytest.raises(AppError) as exc_info:
            edit_todo_title(store, 2, "edited title")
        assert str(exc_info.value) == "Todo with id: 2, is not found!"
        store.set.assert_not_called()


class TestAddLabel:
    def test_adds_new_label(self, make_store):
        store = make_store([Todo(id=1, title="Todo 1")])
        result = add_label(store, 1, "urgent")
        expected = Todo(id=1, title="Todo 1", labels=["urgent"])
        assert result == expected
        store.set.assert_called_once_with([expected])

    def test_duplicate_label_is_not_added_but_still_persisted(self, make_store):
        todos = [Todo(id=1, title="Todo 1", labels=["urgent"])]
        store = make_store(todos)
        result = add_label(store, 1, "urgent")
        assert result.labels == ["urgent"]
        store.set.assert_called_once_with(todos)

    def test_adding_twice_keeps_one(self):
        store = InMemoryTodoStore([Todo(id=1, title="Todo 1")])
        add_label(store, 1, "work")
        add_label(store, 1, "work")
        assert store.get()[0].labels == ["work"]

    def test_labels_are_case_sensitive(self):
        store = InMemoryTodoStore([Todo(id=1, title="Todo 1", labels=["work"])])
        assert add_label(store, 1, "Work").labels == ["work", "Work"]

    def test_appends_in_order(self, make_store):
        store = make_store([Todo(id=1, title="Todo 1", labels=["work", "urgent"])])
        assert add_label(store, 1, "home").labels == ["work", "urgent", "home"]

    def test_missing_id_raises_not_found(self, make_store):
        store = make_store([Todo(id=1, title="Todo 1")])
        with pytest.raises(AppError) as exc_info:
            add_label(store, 2, "urgent")
        assert str(exc_info.value) == "Todo with id: 2, is not found!"
        store.set.assert_not_called()


class TestDeleteTodo:
    def test_deletes_todo(self, make_store):
        store = make_store([Todo(id=1, title="Todo 1")])
        assert delete_todo(store, 1) is None
        store.set.assert_called_once_with([])

    def test_delete_twice_raises_not_found(self):
        store = InMemoryTodoStore([Todo(id=1, title="a"), Todo(id=2, title="b")])
        delete_todo(store, 2)
        assert store.get() == [Todo(id=1, title="a")]
        with pytest.raises(AppError) as exc_info:
            delete_todo(store, 2)
        assert str(exc_info.value) == "Todo with id: 2, is not found!"

    def test_removes_only_the_matching_todo(self, sample_todos):
        store = InMemoryTodoStore(sample_todos)
        delete_todo(store, 2)
        assert [t.id for t in store.get()] == [1, 3]
