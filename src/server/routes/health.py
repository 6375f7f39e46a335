"""Health check endpoint."""

from __future__ import annotations

import asyncio

from fastapi import FastAPI

from ..dependencies import get_todo_repository
from ..schemas import HealthResponse


def register_health_routes(app: FastAPI) -> None:
    """Register the liveness probe."""

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        """Simple health check endpoint."""
        todo_count = await asyncio.to_thread(get_todo_repository().count)
        return HealthResponse(status="ok", todo_count=todo_count)
