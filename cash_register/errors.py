"""Register errors and error message constants."""

from typing import Optional


class errmsg:
    """Error message constants for the register."""

    PRODUCT_EXISTS = "There is already a product with code"
    PRODUCT_NOT_FOUND = "There is no product with code"
    COUPON_EXISTS = "There is already a coupon with code"
    QUANTITY_POSITIVE = "Quantity must be positive"
    MIN_TARGET_NEGATIVE = "min_target cannot be negative"
    AFTER_TARGET_NEGATIVE = "after_target cannot be negative"
    EMPTY_ROUND = "min_target and after_target cannot both be zero"
    UNKNOWN_UNIT = "Unknown pricing unit"


class RegisterError(Exception):
    """Base class for register errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class DuplicateProductError(RegisterError):
    """A product with the same code is already in the catalog."""

    def __init__(self, code: str):
        super().__init__(f"{errmsg.PRODUCT_EXISTS}: {code}")
        self.code = code


class UnknownProductError(RegisterError):
    """Scanned code is not in the catalog."""

    def __init__(self, code: str):
        super().__init__(f"{errmsg.PRODUCT_NOT_FOUND}: {code}")
        self.code = code


class DuplicateCouponError(RegisterError):
    """A coupon with the same code is already registered."""

    def __init__(self, code: str):
        super().__init__(f"{errmsg.COUPON_EXISTS}: {code}")
        self.code = code


class InvalidQuantityError(RegisterError):
    """Scanned quantity is zero or negative."""

    def __init__(self, quantity: float):
        super().__init__(f"{errmsg.QUANTITY_POSITIVE}, got {quantity}")
        self.quantity = quantity
