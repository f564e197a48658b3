"""Checkout — turns a cart into a paid, inventory-adjusted purchase.

Steps, each a possible rejection, strictly in order:

    1. EmptyCheck          → EmptyCart
    2. ValidateLines       → UnknownProduct / ProductExpired / InsufficientStock (first failing line)
    3. PriceCompute        live catalog prices, subtotal + weight-based shipping fee
    4. AffordabilityCheck  → InsufficientBalance
    5. Commit              debit the customer, then reduce stock line by line
    6. ReceiptEmit

Nothing is mutated before Commit, so every rejection leaves the customer and
the catalog untouched. Steps 2 to 6 run while holding the locks of the
customer and of every product in the cart. The locks belong to the catalog,
so every service over one catalog shares them and a concurrent checkout cannot
sell the same units or spend the same balance between validation and commit.
"""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError

from storefront.cart.cart import Cart
from storefront.catalog.catalog import Catalog
from storefront.catalog.product import is_expired, unit_price
from storefront.checkout.locking import LockRegistry
from storefront.checkout.receipt import Receipt, ReceiptLine
from storefront.customer.customer import Customer
from storefront.domain import logger
from storefront.exceptions import (
    CheckoutIntegrityError,
    EmptyCart,
    InsufficientBalance,
    InsufficientStock,
    ProductExpired,
    UnknownProduct,
)
from storefront.money import ZERO
from storefront.shipping.calculator import ShippingCalculator, shippable_units


def _utc_today():
    return datetime.now(UTC).date()


class CheckoutService:
    def __init__(
        self,
        catalog: Catalog,
        shipping: ShippingCalculator | None = None,
        locks: LockRegistry | None = None,
        clock=None,
    ) -> None:
        self.catalog = catalog
        self.shipping = shipping or ShippingCalculator()
        self.locks = locks or catalog.locks
        self.clock = clock or _utc_today

    def checkout(self, customer: Customer, cart: Cart) -> Receipt:
        """Charge ``customer`` for ``cart`` and take the units out of stock."""
        if cart.is_empty():
            raise EmptyCart()

        lines = cart.line_items()
        resource_ids = [customer.id] + [line.product_id for line in lines]

        with self.locks.holding(resource_ids):
            products = self._resolve_products(lines)
            self._validate_lines(lines, products)

            line_totals = [unit_price(products[str(line.product_id)]) * line.quantity for line in lines]
            subtotal = sum(line_totals, ZERO)
            units = shippable_units(lines, products)
            shipping_fee = self.shipping.calculate_fee(units)
            total_amount = subtotal + shipping_fee

            if not customer.can_afford(total_amount):
                raise InsufficientBalance()

            self._commit(customer, lines, products, total_amount)

            manifest = self.shipping.manifest(units)
            receipt = Receipt(
                lines=tuple(
                    ReceiptLine(quantity=line.quantity, name=products[str(line.product_id)].name, line_total=total)
                    for line, total in zip(lines, line_totals)
                ),
                subtotal=subtotal,
                shipping_fee=shipping_fee,
                total_amount=total_amount,
                resulting_balance=customer.available_balance(),
                manifest=manifest,
            )

        logger.debug(
            "Shipment notice",
            units=[(entry.label, entry.weight_grams) for entry in manifest.entries],
            total_weight_kg=str(manifest.total_weight_kg),
        )
        logger.info(
            "Checkout completed",
            customer_id=str(customer.id),
            cart_id=str(cart.id),
            line_count=len(lines),
            total_amount=str(total_amount),
        )
        return receipt

    def _resolve_products(self, lines):
        products = {}
        for line in lines:
            try:
                products[str(line.product_id)] = self.catalog.get(line.product_id)
            except ObjectNotFoundError:
                raise UnknownProduct(line.product_name) from None
        return products

    def _validate_lines(self, lines, products):
        today = self.clock()
        for line in lines:
            product = products[str(line.product_id)]
            if is_expired(product, today):
                raise ProductExpired(product.name)
            if product.stock_quantity < line.quantity:
                raise InsufficientStock(product.name)

    def _commit(self, customer, lines, products, total_amount):
        try:
            customer.deduct_balance(total_amount)
            for line in lines:
                products[str(line.product_id)].reduce_stock(line.quantity)
        except Exception as exc:
            logger.error(
                "Checkout commit failed after validation",
                customer_id=str(customer.id),
                error=str(exc),
            )
            raise CheckoutIntegrityError(f"Checkout for customer {customer.id} was only partially applied") from exc
