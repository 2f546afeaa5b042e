"""Utils package for the GymBro matching service."""

from gymbro.utils.errors import (
    ConfigurationError,
    CorruptDataError,
    GymBroError,
    NoCandidatesError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from gymbro.utils.helpers import now_ms, require_user_id
from gymbro.utils.logging import configure_logging, get_logger, log_error

__all__ = [
    "ConfigurationError",
    "CorruptDataError",
    "GymBroError",
    "NoCandidatesError",
    "NotFoundError",
    "PersistenceError",
    "ValidationError",
    "configure_logging",
    "get_logger",
    "log_error",
    "now_ms",
    "require_user_id",
]
