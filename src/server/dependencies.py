"""Dependency helpers shared across FastAPI routes."""

from __future__ import annotations

from functools import lru_cache

from src.todo import (
    CreateTodo,
    GetTodos,
    InMemoryTodoRepository,
    TodoItem,
    TodoRepositoryBase,
    UpdateTodo,
    new_todo,
)
from src.todo_service.config import Config
from src.todo_service.logger import setup_logger

from .schemas import TodoResponse

config = Config.from_yaml()
setup_logger(log_level=config.log_level, log_file=config.log_file)


@lru_cache(maxsize=1)
def get_todo_repository() -> TodoRepositoryBase:
    """Singleton todo store, alive for the whole process."""
    return InMemoryTodoRepository()


def get_create_todo() -> CreateTodo:
    return CreateTodo(get_todo_repository(), todo_factory=new_todo)


def get_get_todos() -> GetTodos:
    return GetTodos(get_todo_repository())


def get_update_todo() -> UpdateTodo:
    return UpdateTodo(get_todo_repository())


def serialize_todo(item: TodoItem) -> TodoResponse:
    """Convert domain TodoItem to API response."""
    return TodoResponse(id=item.id, title=item.title, completed=item.completed)
