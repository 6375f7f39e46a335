"""CLI entry point for launching the FastAPI app with uvicorn."""

import logging

import uvicorn

from .app import app
from .dependencies import config

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the todo server on the configured port."""
    logger.info("Server running on port %s", config.server.port)
    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
    )


if __name__ == "__main__":
    main()
