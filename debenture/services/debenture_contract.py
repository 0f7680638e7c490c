"""Debenture contract operations.

Debentures are unsecured bonds paying a fixed interest rate. A holder keeps
the debenture until maturity, collecting a coupon each period.

The contract holds no state of its own: every operation reads from (or, for
``issue``, writes to) the store it was given.
"""

import logging
from typing import Union

from pydantic import ValidationError as PydanticValidationError

from debenture.lib.errors import ValidationError
from debenture.lib.terms_models import IssueTerms
from debenture.models.field_key import FieldKey
from debenture.models.frequency import CouponPaymentFrequency
from debenture.services.coupon_calculator import calculate_coupon_payment
from debenture.services.instrument_store import InstrumentStore

logger = logging.getLogger(__name__)


class DebentureContract:
    """Issue a debenture and query its terms and coupon payments."""

    def __init__(self, store: InstrumentStore):
        """
        Initialize contract.

        Args:
            store: Storage for this contract's fields
        """
        self.store = store

    def issue(
        self,
        maturity: int,
        coupon_rate: int,
        par_value: int,
        coupon_payment_frequency: Union[int, CouponPaymentFrequency],
        debenture_holder: Union[bytes, str],
    ) -> IssueTerms:
        """
        Write the debenture's terms.

        Nothing is written unless every argument validates. Calling issue again
        overwrites the previous terms; preventing re-issue is up to the caller.

        Args:
            maturity: Timestamp after which no further coupons accrue
            coupon_rate: Annual rate in basis points (>= 0)
            par_value: Face value (>= 0)
            coupon_payment_frequency: Frequency code (0-5) or member
            debenture_holder: 32 bytes, or 64 hex characters

        Returns:
            The validated terms as stored

        Raises:
            InvalidFrequencyCodeError: If the frequency code is unknown
            InvalidHolderError: If the holder is not 32 bytes
            ValidationError: If an amount is negative or not an integer
        """
        try:
            terms = IssueTerms(
                maturity=maturity,
                coupon_rate=coupon_rate,
                par_value=par_value,
                coupon_payment_frequency=coupon_payment_frequency,
                debenture_holder=debenture_holder,
            )
        except PydanticValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise ValidationError(f"Invalid issue terms: {problems}") from e

        self.store.set(FieldKey.MATURITY, terms.maturity)
        self.store.set(FieldKey.COUPON_RATE, terms.coupon_rate)
        self.store.set(FieldKey.PAR_VALUE, terms.par_value)
        self.store.set(FieldKey.DEBENTURE_HOLDER, terms.debenture_holder)
        self.store.set(FieldKey.COUPON_PAYMENT_FREQUENCY, terms.coupon_payment_frequency.code)

        logger.info(
            "Issued debenture: maturity=%s rate=%sbp par=%s frequency=%s holder=%s",
            terms.maturity,
            terms.coupon_rate,
            terms.par_value,
            terms.coupon_payment_frequency,
            terms.holder_hex,
        )
        return terms

    def maturity(self) -> int:
        """Maturity timestamp (0 before issue)."""
        return int(self.store.get(FieldKey.MATURITY))

    def par_value(self) -> int:
        """Face value (0 before issue)."""
        return int(self.store.get(FieldKey.PAR_VALUE))

    def coupon_rate(self) -> int:
        """Annual coupon rate in basis points (0 before issue)."""
        return int(self.store.get(FieldKey.COUPON_RATE))

    def coupon_payment_frequency(self) -> CouponPaymentFrequency:
        """
        Stored payment frequency (annual before issue).

        Raises:
            InvalidFrequencyCodeError: If the stored code is unknown
        """
        return CouponPaymentFrequency.from_code(self.store.get(FieldKey.COUPON_PAYMENT_FREQUENCY))

    def debenture_holder(self) -> bytes:
        """Holder identity (32 zero bytes before issue)."""
        return bytes(self.store.get(FieldKey.DEBENTURE_HOLDER))

    def coupon_payment(self, now: int) -> int:
        """
        Coupon owed at ``now``; zero once ``now`` is past maturity.

        Args:
            now: Current timestamp

        Raises:
            InvalidFrequencyCodeError: If the stored frequency code is unknown
        """
        return calculate_coupon_payment(
            now=now,
            maturity=self.maturity(),
            par_value=self.par_value(),
            coupon_rate=self.coupon_rate(),
            frequency=self.coupon_payment_frequency(),
        )

    def terms(self) -> IssueTerms:
        """Snapshot of every stored field as IssueTerms."""
        return IssueTerms.model_construct(
            maturity=self.maturity(),
            coupon_rate=self.coupon_rate(),
            par_value=self.par_value(),
            coupon_payment_frequency=self.coupon_payment_frequency(),
            debenture_holder=self.debenture_holder(),
        )
