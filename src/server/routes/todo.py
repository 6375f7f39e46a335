"""Todo endpoints."""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from fastapi import Body, FastAPI, status
from fastapi.responses import JSONResponse

from ..dependencies import get_create_todo, get_get_todos, get_update_todo, serialize_todo
from ..errors import error_response
from ..schemas import ErrorResponse, TodoCreateRequest, TodoResponse, TodoUpdateRequest

logger = logging.getLogger(__name__)


def register_todo_routes(app: FastAPI) -> None:
    """Register todo create/list/update endpoints."""

    @app.post(
        "/todos",
        response_model=TodoResponse,
        status_code=status.HTTP_201_CREATED,
        responses={400: {"model": ErrorResponse}},
    )
    async def create_todo(request: TodoCreateRequest) -> Union[TodoResponse, JSONResponse]:
        """Create a new todo."""
        use_case = get_create_todo()
        try:
            todo = await use_case.execute(request.model_dump(exclude_unset=True))
        except Exception as exc:
            logger.exception("Failed to create todo: %s", exc)
            return error_response(exc, status.HTTP_400_BAD_REQUEST)
        logger.info("Todo created: %s", todo.id)
        return serialize_todo(todo)

    @app.get("/todos", response_model=List[TodoResponse])
    async def list_todos() -> List[TodoResponse]:
        """List todos in creation order."""
        todos = await get_get_todos().execute()
        return [serialize_todo(todo) for todo in todos]

    @app.put(
        "/todos/{todo_id}",
        response_model=TodoResponse,
        responses={404: {"model": ErrorResponse}},
    )
    async def update_todo(
        todo_id: str,
        request: Optional[TodoUpdateRequest] = Body(default=None),
    ) -> Union[TodoResponse, JSONResponse]:
        """Update title and/or completed flag of an existing todo.

        A missing body is treated as an empty update.
        """
        use_case = get_update_todo()
        try:
            payload = request.model_dump(exclude_unset=True, exclude_none=True) if request else {}
            todo = await use_case.execute(todo_id, payload)
        except Exception as exc:
            logger.exception("Failed to update todo %s: %s", todo_id, exc)
            return error_response(exc, status.HTTP_404_NOT_FOUND)
        return serialize_todo(todo)
