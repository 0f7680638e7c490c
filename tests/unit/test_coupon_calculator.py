"""Unit tests for coupon payment calculation."""

import pytest

from debenture.models.frequency import CouponPaymentFrequency
from debenture.services.coupon_calculator import (
    calculate_coupon_payment,
    periodic_rate,
    truncating_div,
)

NOW = 1_700_000_000
TEN_YEARS = 10 * 365 * 24 * 60 * 60


@pytest.mark.unit
class TestTruncatingDiv:
    """Test suite for truncating_div."""

    def test_positive_operands_truncate_down(self):
        assert truncating_div(750, 4) == 187
        assert truncating_div(7, 7) == 1
        assert truncating_div(6, 7) == 0

    def test_negative_numerator_truncates_toward_zero(self):
        """Floor division would give -188 here."""
        assert truncating_div(-750, 4) == -187

    def test_negative_denominator_truncates_toward_zero(self):
        assert truncating_div(750, -4) == -187
        assert truncating_div(-750, -4) == 187

    def test_zero_denominator_raises(self):
        with pytest.raises(ZeroDivisionError):
            truncating_div(1, 0)

    def test_arbitrary_precision(self):
        big = 10**40 + 7
        assert truncating_div(big, 10) == 10**39


@pytest.mark.unit
class TestPeriodicRate:
    """Test suite for periodic_rate."""

    @pytest.mark.parametrize(
        "frequency,expected",
        [
            (CouponPaymentFrequency.ANNUALLY, 750),
            (CouponPaymentFrequency.BIANNUALLY, 375),
            (CouponPaymentFrequency.QUARTERLY, 187),
            (CouponPaymentFrequency.MONTHLY, 62),
            (CouponPaymentFrequency.WEEKLY, 14),
            (CouponPaymentFrequency.DAILY, 2),
        ],
    )
    def test_rate_per_period_is_truncated(self, frequency, expected):
        assert periodic_rate(750, frequency) == expected

    def test_small_rate_truncates_to_zero(self):
        """A 300bp daily coupon rounds to 0bp per period."""
        assert periodic_rate(300, CouponPaymentFrequency.DAILY) == 0


@pytest.mark.unit
class TestCalculateCouponPayment:
    """Test suite for calculate_coupon_payment."""

    def test_annual_coupon(self):
        """(100000 * (750 / 1)) / 100."""
        payment = calculate_coupon_payment(
            now=NOW,
            maturity=NOW + TEN_YEARS,
            par_value=100_000,
            coupon_rate=750,
            frequency=CouponPaymentFrequency.ANNUALLY,
        )
        assert payment == 750_000

    def test_quarterly_truncates_rate_before_multiplying(self):
        """750 / 4 truncates to 187 before the multiply: 100000 * 187 / 100."""
        payment = calculate_coupon_payment(
            now=NOW,
            maturity=NOW + TEN_YEARS,
            par_value=100_000,
            coupon_rate=750,
            frequency=CouponPaymentFrequency.QUARTERLY,
        )
        assert payment == 187_000
        # Multiplying first would have produced 187500
        assert payment != (100_000 * 750) // 4 // 100

    def test_daily_small_rate_pays_nothing(self):
        """Truncation of the periodic rate is load-bearing at high frequencies."""
        payment = calculate_coupon_payment(
            now=NOW,
            maturity=NOW + TEN_YEARS,
            par_value=1_000_000,
            coupon_rate=300,
            frequency=CouponPaymentFrequency.DAILY,
        )
        assert payment == 0

    def test_final_division_truncates(self):
        """par 150 at 1bp/period: 150 / 100 truncates to 1."""
        payment = calculate_coupon_payment(
            now=0,
            maturity=1,
            par_value=150,
            coupon_rate=1,
            frequency=CouponPaymentFrequency.ANNUALLY,
        )
        assert payment == 1

    def test_after_maturity_pays_zero(self):
        payment = calculate_coupon_payment(
            now=NOW + 1,
            maturity=NOW,
            par_value=100_000,
            coupon_rate=750,
            frequency=CouponPaymentFrequency.ANNUALLY,
        )
        assert payment == 0

    def test_at_maturity_still_pays(self):
        """The maturity boundary is inclusive."""
        payment = calculate_coupon_payment(
            now=NOW,
            maturity=NOW,
            par_value=100_000,
            coupon_rate=750,
            frequency=CouponPaymentFrequency.MONTHLY,
        )
        assert payment == (100_000 * 62) // 100

    def test_all_zero_inputs(self):
        payment = calculate_coupon_payment(
            now=0,
            maturity=0,
            par_value=0,
            coupon_rate=0,
            frequency=CouponPaymentFrequency.ANNUALLY,
        )
        assert payment == 0

    def test_large_values_stay_exact(self):
        par_value = 10**30
        payment = calculate_coupon_payment(
            now=0,
            maturity=10**20,
            par_value=par_value,
            coupon_rate=525,
            frequency=CouponPaymentFrequency.BIANNUALLY,
        )
        assert payment == par_value * 262 // 100
        assert isinstance(payment, int)

    def test_negative_par_value_truncates_toward_zero(self):
        payment = calculate_coupon_payment(
            now=0,
            maturity=1,
            par_value=-150,
            coupon_rate=1,
            frequency=CouponPaymentFrequency.ANNUALLY,
        )
        assert payment == -1
