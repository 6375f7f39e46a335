"""Pydantic schemas for the FastAPI server."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str
    todo_count: int


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    error: str


class TodoResponse(BaseModel):
    """Serialized todo item."""

    id: str
    title: str
    completed: bool


class TodoCreateRequest(BaseModel):
    """Request body for creating todo.

    Presence of ``title`` is checked by the todo factory, not here.
    """

    title: Optional[str] = Field(default=None)
    completed: bool = Field(default=False)


class TodoUpdateRequest(BaseModel):
    """Request body for updating todo."""

    title: Optional[str] = Field(default=None)
    completed: Optional[bool] = Field(default=None)
