"""In-memory todo management: entity, store and use cases."""

from .exceptions import InvalidTodoError, NotFoundError, TodoError
from .models import TodoItem, new_todo
from .repository import InMemoryTodoRepository, TodoRepositoryBase
from .usecases import CreateTodo, GetTodos, UpdateTodo

__all__ = [
    "TodoItem",
    "new_todo",
    "TodoError",
    "NotFoundError",
    "InvalidTodoError",
    "TodoRepositoryBase",
    "InMemoryTodoRepository",
    "CreateTodo",
    "GetTodos",
    "UpdateTodo",
]
