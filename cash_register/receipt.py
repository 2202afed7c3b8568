"""Receipt lines and best-discount aggregation."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional

import structlog

from .coupon import Coupon
from .discount import Discount
from .product import Product

logger = structlog.get_logger()


@dataclass
class ReceiptItem:
    """One purchased line: a product and the quantity (units or weight) bought."""

    product: Product
    quantity: float
    final_price: Optional[float] = None
    discount: Optional[Discount] = None
    discount_label: Optional[str] = None
    discount_saving: Optional[float] = None

    def __post_init__(self) -> None:
        if self.final_price is None:
            self.final_price = self.regular_price()

    def add_quantity(self, added_quantity: float) -> None:
        self.quantity += added_quantity
        self.final_price = self.regular_price()

    def regular_price(self) -> float:
        """Price of the line without any discount."""
        return self.product.price * self.quantity


def best_discount(item: ReceiptItem, discounts: Iterable[Discount]) -> Optional[Discount]:
    """Return the applicable discount with the lowest price for the item.

    Discounts are tried in the given order and only a strictly lower price
    replaces the current best, so the earlier discount wins a tie. Returns
    None when no discount beats the regular price.
    """
    best: Optional[Discount] = None
    min_price = item.regular_price()

    for discount in discounts:
        if not discount.is_applicable_to(item):
            continue

        price = discount.discounted_price(item)
        if price < min_price:
            min_price = price
            best = discount

    return best


def price_item(item: ReceiptItem, discounts: Iterable[Discount]) -> ReceiptItem:
    """Return a copy of the item priced with its best discount, if any."""
    regular = replace(
        item,
        final_price=item.regular_price(),
        discount=None,
        discount_label=None,
        discount_saving=None,
    )

    discount = best_discount(regular, discounts)
    if discount is None:
        return regular

    priced = discount.apply_to(regular)
    logger.debug(
        "discount_applied",
        product_code=item.product.code,
        discount=discount.name,
        saving=priced.discount_saving,
    )
    return priced


@dataclass
class Receipt:
    """Receipt of a single purchase.

    sub_total is the sum of item prices after discounts and before the
    coupon; total is the price after the coupon as well.
    """

    items: list[ReceiptItem]
    discounts: list[Discount] = field(default_factory=list)
    sub_total: float = 0
    total: float = 0
    coupon: Optional[Coupon] = None
    coupon_label: Optional[str] = None
    coupon_saving: Optional[float] = None

    def process_items(self) -> Receipt:
        """Return a copy of this receipt with every item priced.

        Any previously applied coupon is dropped; total equals sub_total.
        """
        items = [price_item(item, self.discounts) for item in self.items]

        sub_total = 0
        for item in items:
            sub_total += item.final_price

        return replace(
            self,
            items=items,
            sub_total=sub_total,
            total=sub_total,
            coupon=None,
            coupon_label=None,
            coupon_saving=None,
        )

    def apply_coupon(self, coupon: Coupon) -> Receipt:
        """Return the receipt with the coupon applied, or self if it is not applicable."""
        if not coupon.is_applicable_to(self):
            return self
        return coupon.apply_to(self)


def price_receipt(
    items: Iterable[ReceiptItem],
    discounts: Iterable[Discount],
    coupon: Optional[Coupon] = None,
) -> Receipt:
    """Price items against the active discounts and an optional coupon."""
    receipt = Receipt(items=list(items), discounts=list(discounts)).process_items()
    if coupon is not None:
        receipt = receipt.apply_coupon(coupon)
    return receipt
