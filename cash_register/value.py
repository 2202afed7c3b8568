"""Price adjustments: fixed amounts and percentages."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Value(ABC):
    """Abstract price adjustment applied on top of a base price."""

    @abstractmethod
    def add_to(self, price: float) -> float:
        """Return the price after this adjustment has been added to it."""
        pass


@dataclass(frozen=True)
class FixedValue(Value):
    """Fixed amount in dollars. Negative amounts are discounts."""

    amount: float

    def add_to(self, price: float) -> float:
        return price + self.amount


@dataclass(frozen=True)
class PercentageValue(Value):
    """Percentage of the price. -100 makes the price zero."""

    percent: float

    def add_to(self, price: float) -> float:
        return (1 + self.percent / 100) * price
