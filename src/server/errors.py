"""Translate exceptions into ``{"error": message}`` JSON responses."""

from __future__ import annotations

import logging
from typing import Dict, Type

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.todo import InvalidTodoError, NotFoundError

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: Dict[Type[Exception], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidTodoError: status.HTTP_400_BAD_REQUEST,
    RequestValidationError: status.HTTP_400_BAD_REQUEST,
}


def status_code_for(exc: Exception, fallback: int) -> int:
    """Look up the status for an exception, walking its class hierarchy."""
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[cls]
    return fallback


def error_response(exc: Exception, fallback_status: int) -> JSONResponse:
    """Build the JSON error response for ``exc``."""
    return JSONResponse(
        status_code=status_code_for(exc, fallback_status),
        content={"error": str(exc)},
    )


def describe_validation_error(exc: RequestValidationError) -> str:
    """Flatten pydantic validation errors into a single message."""
    parts = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        message = err.get("msg", "Invalid request")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request body"


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers for request validation failures."""

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = describe_validation_error(exc)
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(
            status_code=status_code_for(exc, status.HTTP_400_BAD_REQUEST),
            content={"error": message},
        )
