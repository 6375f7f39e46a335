from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Optional

from .models import TodoItem

logger = logging.getLogger(__name__)


class TodoRepositoryBase(ABC):
    """Todoストアの抽象基底クラス

    ユースケースはこの抽象のみに依存する。
    """

    @abstractmethod
    def add(self, todo: TodoItem) -> TodoItem:
        """Todoを末尾に追加して、そのまま返す"""

    @abstractmethod
    def list(self) -> list[TodoItem]:
        """全Todoを追加順で返す"""

    @abstractmethod
    def get(self, todo_id: str) -> Optional[TodoItem]:
        """IDで検索する。見つからなければNone"""

    @abstractmethod
    def update(self, todo: TodoItem) -> Optional[TodoItem]:
        """同じIDのTodoを置き換える。見つからなければNone"""

    @abstractmethod
    def count(self) -> int:
        """保持しているTodoの件数"""


class InMemoryTodoRepository(TodoRepositoryBase):
    """プロセス内リストによるTODO管理。再起動で内容は失われる。"""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._todos: list[TodoItem] = []

    def add(self, todo: TodoItem) -> TodoItem:
        # IDの重複チェックは行わない（採番はエンティティ生成側の責務）
        with self._lock:
            self._todos.append(todo)
        logger.debug("Todo added: %s", todo.id)
        return todo

    def list(self) -> list[TodoItem]:
        with self._lock:
            return list(self._todos)

    def get(self, todo_id: str) -> Optional[TodoItem]:
        with self._lock:
            for todo in self._todos:
                if todo.id == todo_id:
                    return todo
        return None

    def update(self, todo: TodoItem) -> Optional[TodoItem]:
        with self._lock:
            for index, current in enumerate(self._todos):
                if current.id == todo.id:
                    self._todos[index] = todo
                    logger.debug("Todo updated: %s", todo.id)
                    return todo
        return None

    def count(self) -> int:
        with self._lock:
            return len(self._todos)
