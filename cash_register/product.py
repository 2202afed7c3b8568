"""Catalog products."""

from dataclasses import dataclass

from .errors import errmsg

UNIT = "unit"
PRICING_UNITS = (UNIT, "kg", "lb")


def format_number(quantity: float) -> str:
    """Format a quantity without a trailing '.0' on whole numbers."""
    if float(quantity).is_integer():
        return str(int(quantity))
    return str(quantity)


@dataclass(frozen=True)
class Product:
    """A product type that can be scanned at the register.

    Args:
        code: Unique product code scanned at the register.
        name: Product name printed on the receipt.
        price: Price per pricing unit.
        unit: Pricing unit, one of PRICING_UNITS.
    """

    code: str
    name: str
    price: float
    unit: str = UNIT

    def __post_init__(self) -> None:
        if self.unit not in PRICING_UNITS:
            raise ValueError(f"{errmsg.UNKNOWN_UNIT}: {self.unit}")

    def format_quantity(self, quantity: float) -> str:
        if self.unit == UNIT:
            return format_number(quantity)
        return f"{format_number(quantity)} {self.unit}"
