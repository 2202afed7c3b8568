"""Receipt-level coupons."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from .value import Value

if TYPE_CHECKING:
    from .receipt import Receipt


@dataclass(frozen=True)
class Coupon(ABC):
    """Abstract single-use coupon.

    Args:
        code: Unique code printed on the coupon; redeemed at most once.
        name: Name of the coupon program printed on the receipt.
    """

    code: str
    name: str

    @abstractmethod
    def is_applicable_to(self, receipt: Receipt) -> bool:
        pass

    @abstractmethod
    def discounted_price(self, receipt: Receipt) -> float:
        """Receipt total if this coupon were applied."""
        pass

    def saving(self, receipt: Receipt) -> float:
        return receipt.total - self.discounted_price(receipt)

    def apply_to(self, receipt: Receipt) -> Receipt:
        """Return a copy of the receipt with this coupon applied."""
        return replace(
            receipt,
            coupon=self,
            coupon_label=self.name,
            coupon_saving=self.saving(receipt),
            total=self.discounted_price(receipt),
        )


@dataclass(frozen=True)
class CashTargetCoupon(Coupon):
    """Money off once the receipt total reaches a minimum.

    Example: spend $100, get $5 off. The result is not floored at zero.
    """

    target_min: float
    value: Value

    def is_applicable_to(self, receipt: Receipt) -> bool:
        return receipt.total >= self.target_min

    def discounted_price(self, receipt: Receipt) -> float:
        return self.value.add_to(receipt.total)
