"""FastAPI application bootstrap."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .errors import register_error_handlers
from .routes import register_health_routes, register_todo_routes


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="Todo Service API", version="1.0.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    register_todo_routes(app)
    register_health_routes(app)

    return app


app = create_app()
