"""Small helpers shared across the GymBro services."""

import time

from gymbro.utils.errors import ValidationError


def now_ms() -> int:
    """Current wall-clock time as unix epoch milliseconds."""
    return time.time_ns() // 1_000_000


def require_user_id(value: int, field: str = "user_id") -> int:
    """
    Validate a profile identifier.

    Args:
        value (int): Identifier to check.
        field (str): Name reported in the error details.

    Returns:
        int: The identifier, unchanged.

    Raises:
        ValidationError: If the identifier is not a positive integer.
    """
    # bool is an int subclass; True must not pass as user 1
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"Invalid {field}: {value!r}", details={field: value})
    return value
