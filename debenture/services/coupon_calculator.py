"""Coupon payment calculation.

The coupon owed at a point in time is

    payment = (par_value * (coupon_rate / periods_per_year)) / 100

evaluated with integer division truncating toward zero at every step. The
rate is divided by the period count and truncated *before* it is multiplied
by par value, so a quarterly 750bp coupon uses 187bp per period, not 187.5.
Once the timestamp is past maturity nothing further is owed.
"""

import logging

from debenture.lib.config import BASIS_POINTS_DIVISOR
from debenture.models.frequency import CouponPaymentFrequency

logger = logging.getLogger(__name__)


def truncating_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero.

    Python's ``//`` floors, which differs from truncation when the operands
    have different signs.

    Raises:
        ZeroDivisionError: If denominator is zero
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def periodic_rate(coupon_rate: int, frequency: CouponPaymentFrequency) -> int:
    """Coupon rate per period in basis points, truncated."""
    return truncating_div(coupon_rate, frequency.periods_per_year)


def calculate_coupon_payment(
    now: int,
    maturity: int,
    par_value: int,
    coupon_rate: int,
    frequency: CouponPaymentFrequency,
) -> int:
    """Calculate the coupon payment owed at ``now``.

    Args:
        now: Current timestamp
        maturity: Maturity timestamp; a coupon is still owed when now == maturity
        par_value: Face value
        coupon_rate: Annual rate in basis points
        frequency: Coupon periods per year

    Returns:
        Payment amount in par_value units, or 0 once matured

    Example:
        >>> calculate_coupon_payment(0, 10, 100000, 750, CouponPaymentFrequency.QUARTERLY)
        187000
    """
    if now > maturity:
        logger.debug("Matured at %s (now=%s); no coupon owed", maturity, now)
        return 0

    rate_per_period = periodic_rate(coupon_rate, frequency)
    payment = truncating_div(par_value * rate_per_period, BASIS_POINTS_DIVISOR)

    logger.debug(
        "Coupon at %s: par=%s rate=%sbp/%s -> %sbp/period -> %s",
        now,
        par_value,
        coupon_rate,
        frequency.periods_per_year,
        rate_per_period,
        payment,
    )
    return payment
