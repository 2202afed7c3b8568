"""Per-item discount rules.

A discount targets a single product code and computes the price of a whole
receipt line if it were applied. The receipt picks the cheapest applicable
discount for each line; see ``Receipt.process_items``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional

from .errors import errmsg
from .value import Value

if TYPE_CHECKING:
    from .receipt import ReceiptItem


@dataclass(frozen=True)
class Discount(ABC):
    """Abstract discount rule for one product.

    Args:
        name: Label printed on the receipt under the discounted line.
        product_code: Code of the product this discount applies to.
    """

    name: str
    product_code: Optional[str]

    def is_applicable_to(self, item: ReceiptItem) -> bool:
        return item.product.code == self.product_code

    @abstractmethod
    def discounted_price(self, item: ReceiptItem) -> float:
        """Price of the item's full quantity with this discount applied."""
        pass

    def saving(self, item: ReceiptItem) -> float:
        return item.regular_price() - self.discounted_price(item)

    def apply_to(self, item: ReceiptItem) -> ReceiptItem:
        """Return a copy of the item priced with this discount."""
        return replace(
            item,
            discount=self,
            discount_label=self.name,
            discount_saving=self.saving(item),
            final_price=self.discounted_price(item),
        )


@dataclass(frozen=True)
class TradeDiscount(Discount):
    """Classic sale: every unit is marked down by a percentage or fixed amount.

    Examples: "20% off", "$5 off".
    """

    value: Value

    def discounted_price(self, item: ReceiptItem) -> float:
        unit_price = self.value.add_to(item.product.price)
        return max(0, unit_price * item.quantity)


@dataclass(frozen=True)
class QuantityDiscount(Discount):
    """Tiered discount: after min_target full-price units, the next
    after_target units get the markdown, repeating while quantity allows.

    When after_target is None the markdown covers all remaining units of
    the round. Examples: "buy one get one 50% off", "3 for the price of 2".
    """

    min_target: float
    value: Value
    after_target: Optional[float] = None

    def __post_init__(self) -> None:
        if self.min_target < 0:
            raise ValueError(errmsg.MIN_TARGET_NEGATIVE)
        if self.after_target is not None:
            if self.after_target < 0:
                raise ValueError(errmsg.AFTER_TARGET_NEGATIVE)
            if self.min_target == 0 and self.after_target == 0:
                raise ValueError(errmsg.EMPTY_ROUND)

    def is_applicable_to(self, item: ReceiptItem) -> bool:
        return super().is_applicable_to(item) and item.quantity > self.min_target

    def discounted_price(self, item: ReceiptItem) -> float:
        unit_price = item.product.price
        price = 0
        remaining = item.quantity

        while remaining > self.min_target:
            price += unit_price * self.min_target
            remaining -= self.min_target
            at = self.after_target if self.after_target is not None else remaining
            price += self.value.add_to(unit_price) * at
            # can go negative when after_target exceeds what is left
            remaining -= at

        price += remaining * unit_price

        return price
