"""Storefront bounded context — Catalog, Cart, Customer and Checkout.

Handles the stocked product catalog, stock-aware shopping carts, customer
balances, and the checkout transaction that prices a cart (subtotal plus
weight-based shipping), debits the customer and decrements inventory.
"""

from protean.domain import Domain

from storefront.utils.logging import get_logger

logger = get_logger(__name__)

storefront = Domain(name="storefront")
