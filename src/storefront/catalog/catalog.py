"""Catalog — the arena that owns Product records.

Carts and the checkout hold product ids and resolve them here, so every
component sees the same record for a given id. The catalog also owns the
checkout locks, so every checkout against it shares one critical section
per product and customer.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.catalog.product import Product
from storefront.checkout.locking import LockRegistry


class Catalog:
    def __init__(self, products=None):
        self._products: dict[str, Product] = {}
        self.locks = LockRegistry()
        for product in products or []:
            self.add(product)

    def add(self, product: Product) -> Product:
        product_id = str(product.id)
        if product_id in self._products:
            raise ValidationError({"product_id": [f"Product {product_id} is already in the catalog"]})
        self._products[product_id] = product
        return product

    def get(self, product_id) -> Product:
        try:
            return self._products[str(product_id)]
        except KeyError:
            raise ObjectNotFoundError(f"Product {product_id} is not in the catalog") from None

    def __contains__(self, product_id) -> bool:
        return str(product_id) in self._products

    def __iter__(self):
        return iter(self._products.values())

    def __len__(self) -> int:
        return len(self._products)
