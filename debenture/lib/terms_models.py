"""Pydantic model for debenture issue terms.

Validates the arguments to ``issue`` before any field is written, and doubles
as the read-back snapshot of a stored contract.
"""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictInt,
    ValidationInfo,
    field_serializer,
    field_validator,
)

from debenture.lib.validators import (
    validate_frequency_code,
    validate_holder_id,
    validate_non_negative,
)
from debenture.models.frequency import CouponPaymentFrequency


class IssueTerms(BaseModel):
    """Terms of a debenture as written by ``issue``.

    Attributes:
        maturity: Timestamp (Unix seconds) after which no further coupons accrue
        coupon_rate: Annualized rate in basis points
        par_value: Face value repaid at maturity
        coupon_payment_frequency: Coupon periods per year
        debenture_holder: 32-byte holder identity
    """

    model_config = ConfigDict(frozen=True)

    maturity: StrictInt
    coupon_rate: StrictInt
    par_value: StrictInt
    coupon_payment_frequency: CouponPaymentFrequency
    debenture_holder: bytes

    @field_validator("coupon_rate", "par_value", mode="after")
    @classmethod
    def non_negative(cls, v: int, info: ValidationInfo) -> int:
        """Reject negative rates and face values."""
        return validate_non_negative(v, info.field_name)

    @field_validator("coupon_payment_frequency", mode="before")
    @classmethod
    def resolve_frequency(cls, v: Any) -> CouponPaymentFrequency:
        """Accept either a stored code or a frequency member."""
        return validate_frequency_code(v)

    @field_validator("debenture_holder", mode="before")
    @classmethod
    def normalize_holder(cls, v: Any) -> bytes:
        """Accept raw bytes or hex text; always 32 bytes out."""
        return validate_holder_id(v)

    @field_serializer("debenture_holder")
    def serialize_holder(self, v: bytes) -> str:
        return v.hex()

    @field_serializer("coupon_payment_frequency")
    def serialize_frequency(self, v: CouponPaymentFrequency) -> str:
        return v.name

    @property
    def holder_hex(self) -> str:
        """Holder identity as lowercase hex."""
        return self.debenture_holder.hex()
