"""Rejections raised by the catalog, cart, customer and checkout.

Every rejection is a Protean ``ValidationError`` whose ``messages`` dict is
keyed by the offending field, so callers can surface them like any other
domain validation failure.
"""

from protean.exceptions import ValidationError


class CheckoutRejected(ValidationError):
    """Base class for a refused cart or checkout operation."""

    field = "checkout"

    def __init__(self, message):
        super().__init__({self.field: [message]})

    def __str__(self):
        return self.messages[self.field][0]


class EmptyCart(CheckoutRejected):
    field = "cart"

    def __init__(self):
        super().__init__("Cart is empty")


class ProductExpired(CheckoutRejected):
    field = "product"

    def __init__(self, product_name):
        self.product_name = product_name
        super().__init__(f"Product {product_name} is expired")


class InsufficientStock(CheckoutRejected):
    field = "stock"

    def __init__(self, product_name):
        self.product_name = product_name
        super().__init__(f"Product {product_name} is out of stock")


class UnknownProduct(CheckoutRejected):
    field = "product"

    def __init__(self, product_name):
        self.product_name = product_name
        super().__init__(f"Product {product_name} is not in the catalog")


class InsufficientBalance(CheckoutRejected):
    field = "balance"

    def __init__(self):
        super().__init__("Customer's balance is insufficient")


class ExceedsStock(CheckoutRejected):
    field = "quantity"

    def __init__(self, product_name, merged=False):
        self.product_name = product_name
        if merged:
            super().__init__("Total quantity in cart exceeds available stock")
        else:
            super().__init__("Requested quantity exceeds available stock")


class CheckoutIntegrityError(RuntimeError):
    """A mutation failed after payment was taken; the checkout is half-applied."""
