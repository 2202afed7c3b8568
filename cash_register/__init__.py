"""Cash register pricing engine: discounts, coupons and receipts."""

from .value import Value, FixedValue, PercentageValue
from .product import Product, PRICING_UNITS
from .discount import Discount, TradeDiscount, QuantityDiscount
from .coupon import Coupon, CashTargetCoupon
from .receipt import (
    Receipt,
    ReceiptItem,
    best_discount,
    price_item,
    price_receipt,
)
from .formatter import ReceiptLayout, format_money, format_receipt, print_receipt
from .register import CashRegister
from .errors import (
    errmsg,
    RegisterError,
    DuplicateProductError,
    UnknownProductError,
    DuplicateCouponError,
    InvalidQuantityError,
)
from .config import RegisterConfig
from .logging_config import configure_logging

__all__ = [
    "Value",
    "FixedValue",
    "PercentageValue",
    "Product",
    "PRICING_UNITS",
    "Discount",
    "TradeDiscount",
    "QuantityDiscount",
    "Coupon",
    "CashTargetCoupon",
    "Receipt",
    "ReceiptItem",
    "best_discount",
    "price_item",
    "price_receipt",
    "ReceiptLayout",
    "format_money",
    "format_receipt",
    "print_receipt",
    "CashRegister",
    "errmsg",
    "RegisterError",
    "DuplicateProductError",
    "UnknownProductError",
    "DuplicateCouponError",
    "InvalidQuantityError",
    "RegisterConfig",
    "configure_logging",
]
