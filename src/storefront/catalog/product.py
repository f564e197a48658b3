"""Product aggregate — a stocked catalog entry, tagged Expirable or NonExpirable.

Both variants share name, unit price, stock, shipping flag and unit weight;
only Expirable products carry an expiry date. Behaviour that differs between
variants lives in the module-level functions below, which dispatch on the
``kind`` tag rather than on a subclass.

Stock is decremented only through ``reduce_stock``.
"""

from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, Date, Float, Integer, String

from storefront.catalog.events import StockReduced
from storefront.domain import storefront
from storefront.exceptions import InsufficientStock
from storefront.money import to_decimal


class ProductKind(Enum):
    EXPIRABLE = "Expirable"
    NON_EXPIRABLE = "NonExpirable"


@storefront.aggregate
class Product:
    name = String(required=True, max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    stock_quantity = Integer(default=0, min_value=0)
    kind = String(required=True, choices=ProductKind)
    expiry_date = Date()
    shipping_required = Boolean(default=False)
    weight_kg = Float(default=0.0, min_value=0.0)

    @invariant.post
    def expirable_products_must_have_an_expiry_date(self):
        if self.kind == ProductKind.EXPIRABLE.value and self.expiry_date is None:
            raise ValidationError({"expiry_date": ["Expirable products need an expiry date"]})

    @invariant.post
    def non_expirable_products_cannot_have_an_expiry_date(self):
        if self.kind == ProductKind.NON_EXPIRABLE.value and self.expiry_date is not None:
            raise ValidationError({"expiry_date": ["Non-expirable products cannot have an expiry date"]})

    # -------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------
    @classmethod
    def expirable(
        cls,
        name,
        unit_price,
        stock_quantity,
        expiry_date,
        requires_shipping=False,
        weight_kg=0.0,
    ):
        return cls(
            name=name,
            unit_price=float(unit_price),
            stock_quantity=stock_quantity,
            kind=ProductKind.EXPIRABLE.value,
            expiry_date=expiry_date,
            shipping_required=requires_shipping,
            weight_kg=float(weight_kg),
        )

    @classmethod
    def non_expirable(cls, name, unit_price, stock_quantity, requires_shipping=False, weight_kg=0.0):
        return cls(
            name=name,
            unit_price=float(unit_price),
            stock_quantity=stock_quantity,
            kind=ProductKind.NON_EXPIRABLE.value,
            shipping_required=requires_shipping,
            weight_kg=float(weight_kg),
        )

    # -------------------------------------------------------------------
    # Stock
    # -------------------------------------------------------------------
    def reduce_stock(self, amount):
        """Take ``amount`` units out of stock."""
        if amount <= 0:
            raise ValidationError({"amount": ["Amount must be positive"]})
        if amount > self.stock_quantity:
            raise InsufficientStock(self.name)

        self.stock_quantity -= amount

        self.raise_(
            StockReduced(
                product_id=str(self.id),
                name=self.name,
                quantity=amount,
                remaining=self.stock_quantity,
            )
        )


def is_expired(product, today=None) -> bool:
    """Whether the product can no longer be sold.

    An expirable product is still sellable on its expiry date.
    """
    kind = ProductKind(product.kind)
    if kind == ProductKind.EXPIRABLE:
        today = today or datetime.now(UTC).date()
        return today > product.expiry_date
    return False


def requires_shipping(product) -> bool:
    return bool(product.shipping_required)


def shipping_weight(product) -> Decimal:
    return to_decimal(product.weight_kg)


def unit_price(product) -> Decimal:
    return to_decimal(product.unit_price)
