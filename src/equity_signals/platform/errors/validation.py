from __future__ import annotations

from .invalid_configuration_error import InvalidConfigurationError


def require_positive_int(*, value: int, name: str) -> int:
    """
    Validate a strictly positive integer configuration value.

    Args:
        value: Candidate value.
        name: Parameter name used in diagnostics.
    Returns:
        int: The validated value.
    Assumptions:
        Booleans are rejected even though bool is an int subclass.
    Raises:
        InvalidConfigurationError: If value is not an int or is <= 0.
    Side Effects:
        None.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigurationError(f"{name} must be int, got {type(value).__name__}")
    if value <= 0:
        raise InvalidConfigurationError(f"{name} must be > 0, got {value}")
    return value


def require_non_negative_int(*, value: int, name: str) -> int:
    """
    Validate a non-negative integer configuration value (day windows, delays).

    Args:
        value: Candidate value.
        name: Parameter name used in diagnostics.
    Returns:
        int: The validated value.
    Assumptions:
        Booleans are rejected even though bool is an int subclass.
    Raises:
        InvalidConfigurationError: If value is not an int or is negative.
    Side Effects:
        None.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigurationError(f"{name} must be int, got {type(value).__name__}")
    if value < 0:
        raise InvalidConfigurationError(f"{name} must be >= 0, got {value}")
    return value
