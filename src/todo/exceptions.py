"""Todoドメインのカスタム例外定義"""


class TodoError(Exception):
    """Todo基底例外"""

    pass


class NotFoundError(TodoError):
    """指定IDのTodoが存在しない"""

    def __init__(self, message: str = "Todo not found") -> None:
        super().__init__(message)


class InvalidTodoError(TodoError):
    """Todo作成データが不正"""

    pass
