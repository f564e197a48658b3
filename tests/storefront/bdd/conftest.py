"""Shared BDD fixtures and step definitions for checkout scenarios."""

from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest
from pytest_bdd import given, parsers, then
from storefront.cart.cart import Cart
from storefront.catalog.catalog import Catalog
from storefront.catalog.product import Product
from storefront.customer.customer import Customer


@pytest.fixture()
def catalog():
    return Catalog()


@pytest.fixture()
def products():
    """Products by scenario name."""
    return {}


@pytest.fixture()
def cart():
    return Cart()


@pytest.fixture()
def outcome():
    """Container for the receipt or the captured rejection."""
    return {"receipt": None, "exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('product "{name}" priced {price:d} with {stock:d} in stock that does not ship'))
def product_without_shipping(catalog, products, name, price, stock):
    products[name] = catalog.add(Product.non_expirable(name, price, stock))


@given(parsers.cfparse('product "{name}" priced {price:d} with {stock:d} in stock that ships at {weight:f} kg'))
def product_with_shipping(catalog, products, name, price, stock, weight):
    products[name] = catalog.add(
        Product.non_expirable(name, price, stock, requires_shipping=True, weight_kg=weight)
    )


@given(parsers.cfparse('product "{name}" priced {price:d} with {stock:d} in stock that expired yesterday'))
def expired_product(catalog, products, name, price, stock):
    yesterday = datetime.now(UTC).date() - timedelta(days=1)
    products[name] = catalog.add(Product.expirable(name, price, stock, yesterday))


@given(parsers.cfparse("a customer with a balance of {balance:d}"), target_fixture="customer")
def customer_with_balance(balance):
    return Customer.register("Shopper", balance)


@given(parsers.cfparse('the cart holds {qty:d} of "{name}"'))
def cart_holds(cart, products, qty, name):
    cart.add(products[name], qty)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the customer's balance is {balance:d}"))
def customer_balance_is(customer, balance):
    assert customer.available_balance() == Decimal(balance)


@then(parsers.cfparse('product "{name}" has {stock:d} in stock'))
def product_stock_is(products, name, stock):
    assert products[name].stock_quantity == stock
