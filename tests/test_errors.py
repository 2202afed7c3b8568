"""Tests for error types."""

from cash_register.errors import (
    DuplicateCouponError,
    DuplicateProductError,
    InvalidQuantityError,
    RegisterError,
    UnknownProductError,
    errmsg,
)


class TestRegisterError:
    def test_message_only(self) -> None:
        err = RegisterError("something went wrong")
        assert err.message == "something went wrong"
        assert err.cause is None
        assert str(err) == "something went wrong"

    def test_with_cause(self) -> None:
        cause = KeyError("BANA")
        err = RegisterError("lookup failed", cause)
        assert err.cause is cause
        assert str(err) == "lookup failed: 'BANA'"


class TestRegisterErrorSubclasses:
    def test_duplicate_product(self) -> None:
        err = DuplicateProductError("BANA")
        assert str(err) == f"{errmsg.PRODUCT_EXISTS}: BANA"
        assert isinstance(err, RegisterError)

    def test_unknown_product(self) -> None:
        err = UnknownProductError("MILK")
        assert str(err) == "There is no product with code: MILK"
        assert err.code == "MILK"

    def test_duplicate_coupon(self) -> None:
        err = DuplicateCouponError("8JWN")
        assert str(err) == f"{errmsg.COUPON_EXISTS}: 8JWN"

    def test_invalid_quantity(self) -> None:
        err = InvalidQuantityError(0)
        assert err.quantity == 0
        assert str(err).startswith(errmsg.QUANTITY_POSITIVE)
