"""Structured logging for the GymBro matching service.

Every event is a `structlog` event rendered through the standard library
root logger. Each event is stamped with the service name and environment,
so callers never pass them.
"""

import logging
import sys
from typing import Any, Dict, Optional

import structlog
from structlog.types import EventDict, Processor

from gymbro.config import settings
from gymbro.utils.errors import GymBroError


def add_service_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Stamp each event with the service name and environment."""
    event_dict.setdefault("app", settings.APP_NAME)
    event_dict.setdefault("environment", settings.ENVIRONMENT)
    return event_dict


def _renderer() -> Processor:
    if settings.ENVIRONMENT.lower() == "development":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def configure_logging() -> None:
    """
    Configure `structlog` for the service.

    Console output in development, one JSON object per line elsewhere. The
    level comes from `LOG_LEVEL`, falling back to INFO for unknown names.
    """
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", level=level, stream=sys.stdout)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            add_service_context,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, **initial_values: Any) -> structlog.stdlib.BoundLogger:
    """Return a logger named `name` with `initial_values` bound."""
    return structlog.get_logger(name).bind(**initial_values)  # type: ignore


def log_error(
    logger: structlog.stdlib.BoundLogger,
    error: Exception,
    message: Optional[str] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Log `error` at error level with its traceback.

    A `GymBroError` also contributes its `details` and the HTTP status it maps
    to, so a failed request and its log line can be matched up.

    Args:
        logger (structlog.stdlib.BoundLogger): Logger to write to.
        error (Exception): The exception being reported.
        message (Optional[str]): Event name. Defaults to "An error occurred".
        extra (Optional[Dict[str, Any]]): Additional context. Not modified.
    """
    context = dict(extra or {})
    context["error_type"] = type(error).__name__
    context["error_message"] = str(error)

    if isinstance(error, GymBroError):
        context["error_details"] = error.details
        context["status_code"] = error.status_code

    logger.error(message or "An error occurred", **context, exc_info=error)
