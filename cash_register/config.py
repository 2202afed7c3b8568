"""Register configuration from the environment."""

import os
from dataclasses import dataclass
from typing import Mapping

from .formatter import ReceiptLayout

ENV_PREFIX = "CASH_REGISTER_"


def _int_from_env(environ: Mapping[str, str], name: str, default: int) -> int:
    key = f"{ENV_PREFIX}{name}"
    raw = environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None


@dataclass
class RegisterConfig:
    """Receipt layout and logging settings.

    Environment variables:
        CASH_REGISTER_QTY_WIDTH: Quantity column width (default: 10)
        CASH_REGISTER_PRODUCT_WIDTH: Product column width (default: 30)
        CASH_REGISTER_PRICE_WIDTH: Price column width (default: 16)
        CASH_REGISTER_LOG_LEVEL: Minimum log level name (default: info)
    """

    qty_width: int = 10
    product_width: int = 30
    price_width: int = 16
    log_level: str = "info"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> "RegisterConfig":
        return cls(
            qty_width=_int_from_env(environ, "QTY_WIDTH", cls.qty_width),
            product_width=_int_from_env(environ, "PRODUCT_WIDTH", cls.product_width),
            price_width=_int_from_env(environ, "PRICE_WIDTH", cls.price_width),
            log_level=environ.get(f"{ENV_PREFIX}LOG_LEVEL", cls.log_level).lower(),
        )

    def layout(self) -> ReceiptLayout:
        return ReceiptLayout(
            qty_width=self.qty_width,
            product_width=self.product_width,
            price_width=self.price_width,
        )
