from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Mapping

from .exceptions import InvalidTodoError

def _generate_id() -> str:
    return str(uuid.uuid4())

@dataclass(slots=True)
class TodoItem:
    """インメモリで管理されるTodoアイテムの表現。"""

    title: str
    completed: bool = False
    id: str = field(default_factory=_generate_id)  # 作成時に採番、以後不変


def new_todo(data: Mapping[str, Any]) -> TodoItem:
    """入力データから新しいTodoItemを生成する。

    Args:
        data: ``title`` (必須) と ``completed`` (任意) を含むマッピング

    Raises:
        InvalidTodoError: titleが未指定・空文字、またはcompletedがboolでない場合
    """
    title = data.get("title")
    if not isinstance(title, str) or not title.strip():
        raise InvalidTodoError("Title is required")

    completed = data.get("completed", False)
    if not isinstance(completed, bool):
        raise InvalidTodoError("Completed must be a boolean")

    return TodoItem(title=title, completed=completed)
