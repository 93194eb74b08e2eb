"""Error handling utilities for slidespace.

Provides exception classes and validation helpers used at the boundary
between callers and the search/layout core.
"""

import math
from pathlib import Path


class SlidespaceError(Exception):
    """Base exception for slidespace errors."""

    pass


class ValidationError(SlidespaceError):
    """Exception raised when input validation fails."""

    def __init__(self, field: str, value: object, expected: str) -> None:
        """Initialize validation error.

        Args:
            field: Field name that failed validation
            value: Invalid value
            expected: Expected type/description
        """
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"Validation failed for '{field}': expected {expected}, got {value!r}")


class BoardLoadError(SlidespaceError):
    """Exception raised when a board definition cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize board load error.

        Args:
            path: Board file that failed to load
            reason: Reason for failure
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load board {path}: {reason}")


class LayoutError(SlidespaceError):
    """Exception raised when layout input is malformed."""

    def __init__(self, reason: str) -> None:
        """Initialize layout error.

        Args:
            reason: Reason for failure
        """
        self.reason = reason
        super().__init__(f"Layout calculation failed: {reason}")


def validate_range(value: int | float, min_val: int | float, max_val: int | float, name: str = "value") -> None:
    """Validate that a value is within range.

    Args:
        value: Value to validate
        min_val: Minimum allowed value
        max_val: Maximum allowed value
        name: Name of the value for error messages

    Raises:
        ValidationError: If value is out of range
    """
    if not (min_val <= value <= max_val):
        raise ValidationError(name, value, f"value between {min_val} and {max_val}")


def validate_positive(value: int | float, name: str = "value") -> None:
    """Validate that a value is a finite number greater than zero.

    Raises:
        ValidationError: If value is not positive
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(name, value, "positive number")
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(name, value, "positive number")
