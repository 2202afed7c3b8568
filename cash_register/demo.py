#!/usr/bin/env python3
"""Demo: two customers at a register stocked with bananas, Cheerios and wine."""

import argparse
import sys
from typing import Optional, TextIO

from .config import RegisterConfig
from .coupon import CashTargetCoupon
from .discount import QuantityDiscount, TradeDiscount
from .formatter import print_receipt
from .logging_config import configure_logging
from .product import Product
from .register import CashRegister
from .value import FixedValue, PercentageValue


def build_register() -> CashRegister:
    """Create a register with the demo catalog, promotions and coupons."""
    register = CashRegister()

    register.add_product(Product("BANA", "Bananas", 0.99, "lb"))
    register.add_product(Product("CHEE", "Cheerios", 6.99))
    register.add_product(Product("WINE", "Fine Vine", 44.99))

    register.add_discount(TradeDiscount("Bananas - 20% off", "BANA", PercentageValue(-20)))
    register.add_discount(
        QuantityDiscount("Cheerios - buy 3 for 2", "CHEE", 2, PercentageValue(-100), 1)
    )

    for code in ("8JWN", "KFUB", "LDUF"):
        register.add_coupon(CashTargetCoupon(code, "Spend $100, get $5 off", 100, FixedValue(-5)))

    return register


def run_demo(config: RegisterConfig, out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    register = build_register()
    layout = config.layout()

    # some bananas and a box of Cheerios
    register.scan_product("BANA", 2)
    register.scan_product("CHEE")
    print_receipt(register.create_receipt(), layout, out)

    # enough Cheerios for one free box, and wine to get over $100
    register.scan_product("BANA", 2)
    register.scan_product("BANA", 0.5)
    for _ in range(4):
        register.scan_product("CHEE")
    register.scan_product("WINE")
    register.scan_product("WINE")
    register.apply_coupon("8JWN")
    print_receipt(register.create_receipt(), layout, out)


def main(argv: Optional[list] = None) -> int:
    """Run the register demo and print both receipts."""
    config = RegisterConfig.from_env()

    parser = argparse.ArgumentParser(description="Cash register pricing demo")
    parser.add_argument('--log-level', default=config.log_level,
                        help="Minimum log level (debug, info, warning, error)")
    parser.add_argument('--json-logs', action='store_true',
                        help="Emit log lines as JSON")
    args = parser.parse_args(argv)

    configure_logging(args.log_level, json=args.json_logs)
    run_demo(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
