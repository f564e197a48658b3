from datetime import UTC, datetime, timedelta

import pytest
from storefront.cart.cart import Cart
from storefront.catalog.catalog import Catalog
from storefront.catalog.product import Product
from storefront.checkout.service import CheckoutService
from storefront.customer.customer import Customer


@pytest.fixture()
def today():
    return datetime.now(UTC).date()


@pytest.fixture()
def product_a():
    """Non-expiring, nothing to ship."""
    return Product.non_expirable("Product A", 100, 10, requires_shipping=False)


@pytest.fixture()
def product_b():
    """Non-expiring, ships at 0.7 kg per unit."""
    return Product.non_expirable("Product B", 150, 15, requires_shipping=True, weight_kg=0.7)


@pytest.fixture()
def cheese(today):
    return Product.expirable("Cheese", 100, 10, today + timedelta(days=5), requires_shipping=True, weight_kg=0.2)


@pytest.fixture()
def stale_milk(today):
    return Product.expirable("Milk", 40, 20, today - timedelta(days=1), requires_shipping=True, weight_kg=1.0)


@pytest.fixture()
def catalog(product_a, product_b, cheese, stale_milk):
    return Catalog([product_a, product_b, cheese, stale_milk])


@pytest.fixture()
def customer():
    return Customer.register("John Doe", 1000)


@pytest.fixture()
def cart():
    return Cart()


@pytest.fixture()
def service(catalog):
    return CheckoutService(catalog)
