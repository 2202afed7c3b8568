"""Cash register: catalog, promotions, coupons, and the scan session."""

from typing import Optional

import structlog

from .coupon import Coupon
from .discount import Discount
from .errors import (
    DuplicateCouponError,
    DuplicateProductError,
    InvalidQuantityError,
    UnknownProductError,
)
from .product import Product
from .receipt import Receipt, ReceiptItem, price_receipt

logger = structlog.get_logger()


class CashRegister:
    """Register holding the catalog, active promotions, and one scan session.

    Discounts are consulted in registration order when pricing, so an
    earlier discount wins a tie. Coupons are single use: a coupon that gets
    applied at checkout is removed from the register.
    """

    def __init__(self) -> None:
        self._products: dict[str, Product] = {}
        self._discounts: list[Discount] = []
        self._coupons: dict[str, Coupon] = {}
        self._items: list[ReceiptItem] = []
        self._coupon_code: Optional[str] = None

    @property
    def products(self) -> tuple:
        return tuple(self._products.values())

    @property
    def discounts(self) -> tuple:
        return tuple(self._discounts)

    @property
    def coupons(self) -> dict:
        return dict(self._coupons)

    @property
    def scanned_items(self) -> tuple:
        return tuple(self._items)

    @property
    def pending_coupon(self) -> Optional[Coupon]:
        if self._coupon_code is None:
            return None
        return self._coupons.get(self._coupon_code)

    def add_product(self, product: Product) -> None:
        if product.code in self._products:
            raise DuplicateProductError(product.code)

        self._products[product.code] = product
        logger.info("product_added", code=product.code, price=product.price, unit=product.unit)

    def find_product(self, code: str) -> Optional[Product]:
        return self._products.get(code)

    def add_discount(self, discount: Discount) -> None:
        self._discounts.append(discount)
        logger.info("discount_added", name=discount.name, product_code=discount.product_code)

    def add_coupon(self, coupon: Coupon) -> None:
        if coupon.code in self._coupons:
            raise DuplicateCouponError(coupon.code)

        self._coupons[coupon.code] = coupon
        logger.info("coupon_added", code=coupon.code, name=coupon.name)

    def scan_product(self, product_code: str, quantity: float = 1) -> ReceiptItem:
        """Add a quantity of a product to the current session.

        Repeated scans of the same code accumulate on one line.

        Raises:
            InvalidQuantityError: If quantity is not positive.
            UnknownProductError: If the code is not in the catalog.
        """
        if quantity <= 0:
            raise InvalidQuantityError(quantity)

        for item in self._items:
            if item.product.code == product_code:
                item.add_quantity(quantity)
                break
        else:
            product = self.find_product(product_code)
            if product is None:
                raise UnknownProductError(product_code)
            item = ReceiptItem(product, quantity)
            self._items.append(item)

        logger.info("item_scanned", code=product_code, quantity=quantity, line_quantity=item.quantity)
        return item

    def apply_coupon(self, code: str) -> None:
        """Select a coupon to redeem at checkout. Unknown codes are ignored."""
        if code not in self._coupons:
            logger.warning("coupon_not_found", code=code)
            return

        self._coupon_code = code
        logger.info("coupon_selected", code=code)

    def create_receipt(self) -> Receipt:
        """Price the session, redeem the selected coupon, and start a new session."""
        coupon = self.pending_coupon
        receipt = price_receipt(self._items, self._discounts)

        if coupon is not None:
            if coupon.is_applicable_to(receipt):
                receipt = coupon.apply_to(receipt)
                del self._coupons[coupon.code]
                logger.info("coupon_redeemed", code=coupon.code, saving=receipt.coupon_saving)
            else:
                logger.info("coupon_not_applicable", code=coupon.code, total=receipt.total)

        self._items = []
        self._coupon_code = None

        logger.info(
            "receipt_created",
            items=len(receipt.items),
            sub_total=receipt.sub_total,
            total=receipt.total,
        )
        return receipt

    checkout = create_receipt
