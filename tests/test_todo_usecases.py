"""Todoユースケースのテスト"""

import asyncio

import pytest

from src.todo import (
    CreateTodo,
    GetTodos,
    InMemoryTodoRepository,
    InvalidTodoError,
    NotFoundError,
    TodoItem,
    UpdateTodo,
    new_todo,
)


def test_new_todo_defaults():
    todo = new_todo({"title": "buy milk"})
    assert todo.title == "buy milk"
    assert todo.completed is False
    assert todo.id
    assert new_todo({"title": "buy milk"}).id != todo.id


@pytest.mark.parametrize(
    "data",
    [{}, {"title": ""}, {"title": "  "}, {"title": 42}, {"title": "ok", "completed": "yes"}],
)
def test_new_todo_rejects_invalid_data(data):
    with pytest.raises(InvalidTodoError):
        new_todo(data)


def test_create_todo_uses_injected_factory():
    repo = InMemoryTodoRepository()
    calls = []

    def factory(data):
        calls.append(data)
        return TodoItem(title=data["title"].upper(), id="fixed-id")

    created = asyncio.run(CreateTodo(repo, todo_factory=factory).execute({"title": "shout"}))

    assert calls == [{"title": "shout"}]
    assert created.id == "fixed-id"
    assert created.title == "SHOUT"
    assert repo.get("fixed-id") is created


def test_get_todos_returns_all_in_order():
    repo = InMemoryTodoRepository()
    create = CreateTodo(repo)
    for title in ("a", "b", "c"):
        asyncio.run(create.execute({"title": title}))

    todos = asyncio.run(GetTodos(repo).execute())
    assert [todo.title for todo in todos] == ["a", "b", "c"]


def test_update_todo_merge_policy():
    """titleは空文字なら無視、completedはFalseでも反映"""
    repo = InMemoryTodoRepository()
    todo = repo.add(TodoItem(title="original", completed=True))
    update = UpdateTodo(repo)

    updated = asyncio.run(update.execute(todo.id, {"title": "", "completed": False}))
    assert updated.title == "original"
    assert updated.completed is False

    updated = asyncio.run(update.execute(todo.id, {"title": "renamed"}))
    assert updated.title == "renamed"
    assert updated.completed is False
    assert updated.id == todo.id


def test_update_todo_unknown_id_raises():
    repo = InMemoryTodoRepository()

    with pytest.raises(NotFoundError, match="Todo not found"):
        asyncio.run(UpdateTodo(repo).execute("does-not-exist", {"completed": True}))
