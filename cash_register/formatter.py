"""Receipt formatting utilities."""

import sys
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, TextIO

from .receipt import Receipt

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class ReceiptLayout:
    """Column widths of the printed receipt."""

    qty_width: int = 10
    product_width: int = 30
    price_width: int = 16


def pad_right(s: str, width: int) -> str:
    """Left-align s in width columns, truncating if it is too long."""
    return s.ljust(width)[:width]


def pad_left(s: str, width: int) -> str:
    """Right-align s in width columns, truncating if it is too long."""
    return s.rjust(width)[:width]


def format_money(amount: float) -> str:
    """Format an amount as dollars; negative amounts go in parentheses."""
    cents = Decimal(abs(amount)).quantize(CENTS, rounding=ROUND_HALF_UP)
    if amount < 0:
        return f"(${cents})"
    return f"${cents}"


def format_receipt(receipt: Receipt, layout: Optional[ReceiptLayout] = None) -> str:
    """Format a receipt as fixed-width text ready for printing."""
    layout = layout or ReceiptLayout()
    qty_width = layout.qty_width
    product_width = layout.product_width
    price_width = layout.price_width

    def row(qty: str, product: str, price: str) -> str:
        return " ".join([qty, product, price])

    blank_qty = " " * qty_width
    rule = row(blank_qty, " " * product_width, "-" * price_width)

    lines = []

    # header
    lines.append(row(
        pad_right("Qty", qty_width),
        pad_right("Product", product_width),
        pad_left("Price", price_width),
    ))
    lines.append(row("=" * qty_width, "=" * product_width, "=" * price_width))

    # items
    for item in receipt.items:
        lines.append(row(
            pad_right(item.product.format_quantity(item.quantity), qty_width),
            pad_right(item.product.name, product_width),
            pad_left(format_money(item.regular_price()), price_width),
        ))

        if item.discount_saving is not None:
            lines.append(row(
                blank_qty,
                pad_right(item.discount_label, product_width),
                pad_left(format_money(-item.discount_saving), price_width),
            ))

    # footer
    lines.append(rule)
    lines.append(row(
        blank_qty,
        pad_left("SubTotal", product_width),
        pad_left(format_money(receipt.sub_total), price_width),
    ))

    if receipt.coupon_saving is not None:
        lines.append(row(
            blank_qty,
            pad_left(receipt.coupon_label, product_width),
            pad_left(format_money(-receipt.coupon_saving), price_width),
        ))
        lines.append(rule)

    lines.append(row(
        blank_qty,
        pad_left("TOTAL", product_width),
        pad_left(format_money(receipt.total), price_width),
    ))

    return "\n".join(lines)


def print_receipt(
    receipt: Receipt,
    layout: Optional[ReceiptLayout] = None,
    out: Optional[TextIO] = None,
) -> None:
    """Print a receipt followed by two blank lines."""
    out = out or sys.stdout
    out.write(format_receipt(receipt, layout) + "\n\n\n")
