"""Input validation utilities for services and calendars.

This module provides reusable validation functions that raise clear
ValueError or TypeError exceptions for invalid inputs.
"""


def validate_not_none(value, param_name: str):
    """Validate that a required parameter is not None.

    Args:
        value: The value to validate
        param_name: Name of the parameter for error messages

    Raises:
        ValueError: If value is None
    """
    if value is None:
        raise ValueError(f"Parameter '{param_name}' cannot be None")


def validate_not_empty(value: str | None, param_name: str) -> None:
    """Validate that a string parameter is not None or empty.

    Args:
        value: The string value to validate
        param_name: Name of the parameter for error messages

    Raises:
        ValueError: If value is None, empty string, or only whitespace
    """
    if value is None:
        raise ValueError(f"Parameter '{param_name}' cannot be None")
    if not isinstance(value, str):
        raise TypeError(f"Parameter '{param_name}' must be a string, got {type(value).__name__}")
    if not value.strip():
        raise ValueError(f"Parameter '{param_name}' cannot be empty")


def validate_positive(value: int | float | None, param_name: str) -> None:
    """Validate that a numeric parameter is positive.

    Args:
        value: The numeric value to validate
        param_name: Name of the parameter for error messages

    Raises:
        ValueError: If value is None, not a number, or not positive
        TypeError: If value is not int or float
    """
    if value is None:
        raise ValueError(f"Parameter '{param_name}' cannot be None")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Parameter '{param_name}' must be numeric, got {type(value).__name__}")
    if value <= 0:
        raise ValueError(f"Parameter '{param_name}' must be positive, got {value}")
