"""Storage keys for the fields of a debenture record."""

import enum
from typing import Any

from debenture.lib.config import HOLDER_ID_BYTES
from debenture.models.frequency import CouponPaymentFrequency


class FieldKey(int, enum.Enum):
    """Identifier under which each instrument attribute is stored."""

    MATURITY = 0
    COUPON_RATE = 1
    PAR_VALUE = 2
    DEBENTURE_HOLDER = 3
    COUPON_PAYMENT_FREQUENCY = 4

    @property
    def default(self) -> Any:
        """Value read back when the field has never been written."""
        if self is FieldKey.DEBENTURE_HOLDER:
            return bytes(HOLDER_ID_BYTES)
        if self is FieldKey.COUPON_PAYMENT_FREQUENCY:
            return CouponPaymentFrequency.ANNUALLY.code
        return 0

    def encode(self, value: Any) -> str:
        """Render a field value as text for persistent storage."""
        if self is FieldKey.DEBENTURE_HOLDER:
            return bytes(value).hex()
        return str(int(value))

    def decode(self, raw: str) -> Any:
        """Inverse of :meth:`encode`."""
        if self is FieldKey.DEBENTURE_HOLDER:
            return bytes.fromhex(raw)
        return int(raw)
