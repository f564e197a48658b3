"""Storefront checkout demo.

Builds a small sample catalog, fills a cart and checks it out, printing the
shipment notice and the receipt.

Usage:
    python -m storefront.demo                   # Cheese x2, Biscuits x1, Scratch Card x1
    python -m storefront.demo --with-tv         # adds TV x3; the balance no longer covers it
    python -m storefront.demo --rate-per-kg 45  # override the shipping rate
"""

import argparse
import sys
from datetime import UTC, datetime, timedelta
from decimal import Decimal, InvalidOperation

from protean.exceptions import ConfigurationError

from storefront.cart.cart import Cart
from storefront.catalog.catalog import Catalog
from storefront.catalog.product import Product
from storefront.checkout.receipt import render_manifest, render_receipt
from storefront.checkout.service import CheckoutService
from storefront.config import CheckoutSettings
from storefront.customer.customer import Customer
from storefront.exceptions import CheckoutRejected
from storefront.shipping.calculator import ShippingCalculator
from storefront.utils.logging import configure_logging


def sample_catalog(today):
    return {
        "cheese": Product.expirable(
            "Cheese", 100, 10, today + timedelta(days=5), requires_shipping=True, weight_kg=0.2
        ),
        "biscuits": Product.expirable(
            "Biscuits", 150, 15, today + timedelta(days=30), requires_shipping=True, weight_kg=0.7
        ),
        "tv": Product.non_expirable("TV", 500, 5, requires_shipping=True, weight_kg=15.0),
        "scratch_card": Product.non_expirable(
            "Mobile Scratch Card", 25, 100, requires_shipping=False, weight_kg=0.001
        ),
    }


def run(with_tv=False, settings=None, out=None):
    """Run the sample checkout; returns the process exit status."""
    out = out or sys.stdout
    settings = settings or CheckoutSettings.from_env()

    products = sample_catalog(datetime.now(UTC).date())
    catalog = Catalog(products.values())
    customer = Customer.register("John Doe", 1000.0)
    cart = Cart()
    service = CheckoutService(catalog, shipping=ShippingCalculator.from_settings(settings))

    try:
        cart.add(products["cheese"], 2)
        if with_tv:
            cart.add(products["tv"], 3)
        cart.add(products["biscuits"], 1)
        cart.add(products["scratch_card"], 1)

        receipt = service.checkout(customer, cart)
    except CheckoutRejected as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for line in render_manifest(receipt.manifest) + render_receipt(receipt):
        print(line, file=out)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Storefront checkout demo")
    parser.add_argument("--with-tv", action="store_true", help="Add three TVs to the cart")
    parser.add_argument("--rate-per-kg", help="Shipping rate per kg (default: from environment or 30)")
    args = parser.parse_args(argv)

    settings = CheckoutSettings.from_env()
    if args.rate_per_kg is not None:
        try:
            settings = CheckoutSettings(shipping_rate_per_kg=Decimal(args.rate_per_kg))
        except (InvalidOperation, ConfigurationError):
            parser.error(f"invalid shipping rate: {args.rate_per_kg!r}")

    configure_logging()

    from storefront.domain import storefront

    storefront.init()
    with storefront.domain_context():
        return run(with_tv=args.with_tv, settings=settings)


if __name__ == "__main__":
    sys.exit(main())
