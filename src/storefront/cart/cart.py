"""Cart aggregate — ordered (product, quantity) lines checked against live stock.

A cart holds product ids, not products. Each line remembers the product's name
and unit price from when it was created, which is what the cart's own
subtotal shows. The checkout prices every line again from the live catalog
entry.

Adding a product that is already in the cart merges into its line. Both the
requested quantity and the merged quantity are checked against the product's
stock at the time of the call. Stock can move between two calls; the checkout
re-validates every line before taking payment.
"""

from decimal import Decimal

from protean.exceptions import ValidationError
from protean.fields import Float, HasMany, Identifier, Integer, String

from storefront.cart.events import CartLineAdded
from storefront.catalog.product import Product
from storefront.domain import storefront
from storefront.exceptions import ExceedsStock
from storefront.money import ZERO, to_decimal


@storefront.entity(part_of="Cart")
class CartLine:
    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)

    @property
    def line_total(self) -> Decimal:
        return to_decimal(self.unit_price) * self.quantity


@storefront.aggregate
class Cart:
    lines = HasMany(CartLine)

    def add(self, product: Product, quantity):
        """Add ``quantity`` units of ``product`` (or increase its line)."""
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})
        if quantity > product.stock_quantity:
            raise ExceedsStock(product.name)

        existing = self._line_for(product.id)
        if existing:
            merged = existing.quantity + quantity
            if merged > product.stock_quantity:
                raise ExceedsStock(product.name, merged=True)
            existing.quantity = merged
            line = existing
        else:
            line = CartLine(
                product_id=str(product.id),
                product_name=product.name,
                unit_price=product.unit_price,
                quantity=quantity,
            )
            self.add_lines(line)

        self.raise_(
            CartLineAdded(
                cart_id=str(self.id),
                line_id=str(line.id),
                product_id=str(product.id),
                quantity=quantity,
                line_quantity=line.quantity,
            )
        )

    def _line_for(self, product_id):
        return next((line for line in self.lines if str(line.product_id) == str(product_id)), None)

    def quantity_of(self, product_id) -> int:
        line = self._line_for(product_id)
        return line.quantity if line else 0

    def line_items(self) -> tuple[CartLine, ...]:
        return tuple(self.lines)

    def is_empty(self) -> bool:
        return not self.lines

    def subtotal(self) -> Decimal:
        return sum((line.line_total for line in self.lines), ZERO)
