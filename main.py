#!/usr/bin/env python3
"""Main entry point for the GymBro matching service.

Runs the FastAPI application with Uvicorn. The host, port, log level and
reload flag come from `gymbro.config`.

Environment Variables:
    API_HOST (str): The host to bind the server to.
    API_PORT (int): The port to bind the server to.
    LOG_LEVEL (str): The logging level (e.g., 'INFO', 'DEBUG').
    DEBUG (bool): Whether to enable auto-reload for development.
    DATA_FILE (str): Path of the JSON snapshot file.
"""

import uvicorn

from gymbro.config import settings
from gymbro.utils.logging import get_logger

logger = get_logger(__name__)

if __name__ == "__main__":
    logger.info(f"Starting GymBro Matching on {settings.API_HOST}:{settings.API_PORT}")

    uvicorn.run(
        "gymbro.api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.DEBUG,
    )
