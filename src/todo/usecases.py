"""Todoのユースケース

ルート層から呼ばれる単一操作のアプリケーションロジック。
ストアは同期APIのため、``asyncio.to_thread`` でワーカースレッドに逃がす。
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Mapping

from .exceptions import NotFoundError
from .models import TodoItem, new_todo
from .repository import TodoRepositoryBase

TodoFactory = Callable[[Mapping[str, Any]], TodoItem]


class CreateTodo:
    """新しいTodoを作成してストアに追加する"""

    def __init__(self, repository: TodoRepositoryBase, todo_factory: TodoFactory = new_todo):
        self._repository = repository
        self._todo_factory = todo_factory

    async def execute(self, data: Mapping[str, Any]) -> TodoItem:
        todo = self._todo_factory(data)
        return await asyncio.to_thread(self._repository.add, todo)


class GetTodos:
    """全Todoを追加順で返す"""

    def __init__(self, repository: TodoRepositoryBase):
        self._repository = repository

    async def execute(self) -> list[TodoItem]:
        return await asyncio.to_thread(self._repository.list)


class UpdateTodo:
    """既存Todoのtitle/completedを更新する

    - titleは空でない値が渡された場合のみ置き換える（空文字は無視）
    - completedはキーが存在すればFalseでも上書きする
    """

    def __init__(self, repository: TodoRepositoryBase):
        self._repository = repository

    async def execute(self, todo_id: str, data: Mapping[str, Any]) -> TodoItem:
        todo = await asyncio.to_thread(self._repository.get, todo_id)
        if todo is None:
            raise NotFoundError("Todo not found")

        if data.get("title"):
            todo.title = data["title"]
        if "completed" in data:
            todo.completed = data["completed"]

        updated = await asyncio.to_thread(self._repository.update, todo)
        if updated is None:
            raise NotFoundError("Todo not found")
        return updated
