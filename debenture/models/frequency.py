"""
Coupon payment frequency.

Each frequency carries the code it is stored under and the number of coupon
periods it represents per year.
"""

import enum
from typing import Any

from debenture.lib.errors import InvalidFrequencyCodeError


class CouponPaymentFrequency(enum.Enum):
    """How many coupon periods occur per year."""

    ANNUALLY = (0, 1)
    BIANNUALLY = (1, 2)
    QUARTERLY = (2, 4)
    MONTHLY = (3, 12)
    WEEKLY = (4, 52)
    DAILY = (5, 365)

    def __init__(self, code: int, periods_per_year: int):
        self.code = code
        self.periods_per_year = periods_per_year

    @classmethod
    def from_code(cls, code: Any) -> "CouponPaymentFrequency":
        """
        Resolve a stored frequency code.

        Args:
            code: Stored small-integer code (0-5)

        Returns:
            Matching frequency

        Raises:
            InvalidFrequencyCodeError: If the code is not an int or matches no frequency
        """
        if isinstance(code, cls):
            return code
        # bool is an int subclass; True must not silently mean BIANNUALLY
        if isinstance(code, bool) or not isinstance(code, int):
            raise InvalidFrequencyCodeError(code)

        for member in cls:
            if member.code == code:
                return member

        raise InvalidFrequencyCodeError(code)

    @classmethod
    def from_name(cls, name: str) -> "CouponPaymentFrequency":
        """
        Resolve a frequency by name (case-insensitive) or by its numeric code.

        Args:
            name: e.g. "quarterly", "MONTHLY" or "2"

        Raises:
            InvalidFrequencyCodeError: If nothing matches
        """
        normalized = name.strip().upper()
        if normalized.isdigit():
            return cls.from_code(int(normalized))
        try:
            return cls[normalized]
        except KeyError:
            raise InvalidFrequencyCodeError(name) from None

    def __str__(self) -> str:
        return self.name.lower()
