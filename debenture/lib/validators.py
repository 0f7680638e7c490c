"""
Input validation utilities.

Provides validation functions for debenture terms including integer amounts,
frequency codes, holder identities, and timestamps.
"""

import re
from datetime import date, datetime, timezone
from typing import Any, Union

from debenture.lib.config import HOLDER_ID_BYTES
from debenture.lib.errors import InvalidHolderError, InvalidTimestampError, ValidationError
from debenture.models.frequency import CouponPaymentFrequency

_HEX_PATTERN = re.compile(r"^(0x)?[0-9a-fA-F]*$")


def validate_integer(value: Any, field_name: str) -> int:
    """
    Validate value is a true integer (not a bool, float, or string).

    Args:
        value: Value to validate
        field_name: Name used in the error message

    Returns:
        The integer unchanged

    Raises:
        ValidationError: If value is not an int

    Examples:
        >>> validate_integer(750, "coupon_rate")
        750
        >>> validate_integer(7.5, "coupon_rate")
        Traceback (most recent call last):
        ...
        ValidationError: coupon_rate must be an integer, got float
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an integer, got {type(value).__name__}")
    return value


def validate_non_negative(value: Any, field_name: str) -> int:
    """
    Validate value is an integer greater than or equal to zero.

    Args:
        value: Value to validate
        field_name: Name used in the error message

    Returns:
        Validated integer

    Raises:
        ValidationError: If value is not an int or is negative

    Examples:
        >>> validate_non_negative(100000, "par_value")
        100000
        >>> validate_non_negative(-1, "par_value")
        Traceback (most recent call last):
        ...
        ValidationError: par_value must be non-negative, got -1
    """
    value = validate_integer(value, field_name)
    if value < 0:
        raise ValidationError(f"{field_name} must be non-negative, got {value}")
    return value


def validate_frequency_code(code: Any) -> CouponPaymentFrequency:
    """
    Validate a coupon payment frequency code.

    Args:
        code: Frequency code (0-5) or a CouponPaymentFrequency

    Returns:
        Resolved frequency

    Raises:
        InvalidFrequencyCodeError: If the code is unknown
    """
    return CouponPaymentFrequency.from_code(code)


def validate_holder_id(value: Union[bytes, bytearray, str]) -> bytes:
    """
    Validate and normalize a debenture holder identity.

    Args:
        value: 32 raw bytes, or 64 hex characters (optional 0x prefix)

    Returns:
        Holder identity as exactly 32 bytes

    Raises:
        InvalidHolderError: If the value is not a 32-byte identity

    Examples:
        >>> validate_holder_id(bytes(32)) == bytes(32)
        True
        >>> validate_holder_id("ab" * 32)[:2]
        b'\\xab\\xab'
    """
    if isinstance(value, (bytes, bytearray)):
        holder = bytes(value)
    elif isinstance(value, str):
        text = value.strip()
        if not _HEX_PATTERN.match(text):
            raise InvalidHolderError(value, "must be hexadecimal")
        if text.lower().startswith("0x"):
            text = text[2:]
        if len(text) % 2:
            raise InvalidHolderError(value, "hex string has odd length")
        holder = bytes.fromhex(text)
    else:
        raise InvalidHolderError(value, f"unsupported type {type(value).__name__}")

    if len(holder) != HOLDER_ID_BYTES:
        raise InvalidHolderError(
            value, f"must be exactly {HOLDER_ID_BYTES} bytes, got {len(holder)}"
        )

    return holder


def parse_timestamp(value: Union[int, str, date, datetime]) -> int:
    """
    Parse a timestamp into Unix seconds.

    Args:
        value: Integer seconds, a digit string, a YYYY-MM-DD date, or an ISO datetime.
               Naive dates and datetimes are interpreted as UTC.

    Returns:
        Unix timestamp in seconds

    Raises:
        InvalidTimestampError: If the value cannot be parsed

    Examples:
        >>> parse_timestamp("1700000000")
        1700000000
        >>> parse_timestamp("2030-01-01")
        1893456000
    """
    if isinstance(value, bool):
        raise InvalidTimestampError(value)
    if isinstance(value, int):
        return value

    parsed: datetime
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if re.match(r"^-?\d+$", text):
            return int(text)
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise InvalidTimestampError(value) from None
    else:
        raise InvalidTimestampError(value)

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)

    return int(parsed.timestamp())
