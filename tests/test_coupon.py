"""Tests for receipt-level coupons."""

import pytest

from cash_register.coupon import CashTargetCoupon, Coupon
from cash_register.receipt import Receipt
from cash_register.value import FixedValue, PercentageValue


def spend_100_get_5(code: str = "8JWN") -> CashTargetCoupon:
    return CashTargetCoupon(code, "Spend $100, get $5 off", 100, FixedValue(-5))


def receipt_with_total(sub_total: float, total: float = None) -> Receipt:
    return Receipt(items=[], sub_total=sub_total, total=sub_total if total is None else total)


class TestCoupon:
    def test_coupon_is_abstract(self):
        with pytest.raises(TypeError):
            Coupon("CODE", "name")


class TestCashTargetCoupon:
    def test_applicable_over_target(self):
        """$112.93 >= $100."""
        assert spend_100_get_5().is_applicable_to(receipt_with_total(112.93))

    def test_applicable_exactly_at_target(self):
        assert spend_100_get_5().is_applicable_to(receipt_with_total(100))

    def test_not_applicable_below_target(self):
        assert not spend_100_get_5().is_applicable_to(receipt_with_total(99.99))

    def test_discounted_price(self):
        assert spend_100_get_5().discounted_price(receipt_with_total(112.93)) == pytest.approx(107.93)

    def test_apply_to_returns_copy_with_coupon_fields(self):
        receipt = receipt_with_total(112.93)
        coupon = spend_100_get_5()

        applied = coupon.apply_to(receipt)

        assert applied is not receipt
        assert applied.coupon is coupon
        assert applied.coupon_label == "Spend $100, get $5 off"
        assert applied.coupon_saving == pytest.approx(5.00)
        assert applied.total == pytest.approx(107.93)
        assert applied.sub_total == pytest.approx(112.93)
        assert receipt.total == pytest.approx(112.93)
        assert receipt.coupon is None

    def test_checks_and_discounts_current_total(self):
        """Eligibility and saving use total, not sub_total."""
        receipt = receipt_with_total(sub_total=120, total=90)
        coupon = spend_100_get_5()
        assert not coupon.is_applicable_to(receipt)

        percent = CashTargetCoupon("PCT", "10% off over $50", 50, PercentageValue(-10))
        assert percent.saving(receipt) == pytest.approx(9)
        assert percent.apply_to(receipt).total == pytest.approx(81)

    def test_no_floor_at_zero(self):
        """A coupon worth more than the total drives it negative."""
        coupon = CashTargetCoupon("BIG", "Spend $10, get $50 off", 10, FixedValue(-50))
        applied = coupon.apply_to(receipt_with_total(20))
        assert applied.total == pytest.approx(-30)
        assert applied.coupon_saving == pytest.approx(50)
