"""Custom exception classes for debenture."""

from typing import Any


class DebentureError(Exception):
    """Base exception for all debenture errors."""

    def __init__(self, message: str):
        """Initialize with error message."""
        self.message = message
        super().__init__(message)


class DataError(DebentureError):
    """Data validation or processing errors."""

    pass


class ValidationError(DataError):
    """Input validation errors."""

    pass


class InvalidFrequencyCodeError(ValidationError):
    """Unrecognized coupon payment frequency code."""

    def __init__(self, code: Any):
        """
        Initialize with the rejected code.

        Args:
            code: The frequency code that matched no known frequency
        """
        self.code = code
        message = (
            f"Invalid coupon payment frequency code: {code!r}. "
            f"Valid codes: 0 (annually), 1 (biannually), 2 (quarterly), "
            f"3 (monthly), 4 (weekly), 5 (daily)"
        )
        super().__init__(message)


class InvalidHolderError(ValidationError):
    """Malformed debenture holder identity."""

    def __init__(self, value: Any, reason: str = ""):
        """
        Initialize with holder details.

        Args:
            value: The rejected holder value
            reason: Why the holder was rejected
        """
        shown = value.hex() if isinstance(value, (bytes, bytearray)) else str(value)
        if len(shown) > 16:
            shown = f"{shown[:8]}...{shown[-4:]}"
        message = f"Invalid debenture holder: '{shown}'"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InvalidTimestampError(ValidationError):
    """Invalid timestamp format or value."""

    def __init__(self, value: Any, expected_format: str = "Unix seconds or YYYY-MM-DD"):
        """
        Initialize with timestamp details.

        Args:
            value: The invalid timestamp input
            expected_format: Accepted formats
        """
        message = f"Invalid timestamp: '{value}'. Expected format: {expected_format}"
        super().__init__(message)


class DatabaseError(DebentureError):
    """Database operation errors."""

    pass


class ConfigurationError(DebentureError):
    """Configuration errors."""

    pass


# Error message helpers


def format_error_message(error: Exception) -> str:
    """
    Format exception into user-friendly error message.

    Args:
        error: The exception to format

    Returns:
        Formatted error message
    """
    if isinstance(error, DebentureError):
        return error.message

    # Generic errors
    error_type = type(error).__name__
    return f"{error_type}: {str(error)}"


def get_error_color(error: Exception) -> str:
    """
    Get Rich color for error type.

    Args:
        error: The exception

    Returns:
        Rich color name
    """
    if isinstance(error, InvalidFrequencyCodeError):
        return "yellow"
    elif isinstance(error, (ValidationError, DataError)):
        return "red"
    elif isinstance(error, ConfigurationError):
        return "orange"
    elif isinstance(error, DatabaseError):
        return "magenta"
    else:
        return "red"
