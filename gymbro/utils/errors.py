"""Custom exceptions for the GymBro matching service."""

from typing import Any, Dict, Optional


class GymBroError(Exception):
    """Base exception for all GymBro errors."""

    def __init__(self, message: str, status_code: int = 500, details: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize the error with a message and optional details.

        Args:
            message (str): Error message describing what went wrong.
            status_code (int): HTTP status code associated with the error (default 500).
            details (Optional[Dict[str, Any]]): Additional context or debug information.
        """
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(GymBroError):
    """Raised when there's an issue with the application configuration."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, 500, details)


class ValidationError(GymBroError):
    """Raised when an argument is malformed or violates an invariant (self-swipe, bad identifier)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize the validation error.

        Args:
            message (str): Error message.
            details (Optional[Dict[str, Any]]): Additional details.
        """
        super().__init__(message, 400, details)


class NotFoundError(GymBroError):
    """Raised when a requested resource is not found."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize the not found error.

        Args:
            message (str): Error message.
            details (Optional[Dict[str, Any]]): Additional details.
        """
        super().__init__(message, 404, details)


class NoCandidatesError(NotFoundError):
    """Raised when a user has already swiped on every other profile."""


class PersistenceError(GymBroError):
    """Raised when the snapshot file cannot be read or written."""

    def __init__(self, message: str, path: str, details: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize the persistence error.

        Args:
            message (str): Error message.
            path (str): Path of the snapshot file involved.
            details (Optional[Dict[str, Any]]): Additional details.
        """
        error_details = details or {}
        error_details["path"] = path
        super().__init__(message, 500, error_details)


class CorruptDataError(PersistenceError):
    """Raised when the persisted snapshot cannot be parsed or breaks an invariant."""
