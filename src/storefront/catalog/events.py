"""Domain events for the Product aggregate."""

from protean.fields import Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class StockReduced:
    """Units of a product left the warehouse as part of a checkout."""

    __version__ = "v1"

    product_id = Identifier(required=True)
    name = String(required=True)
    quantity = Integer(required=True)
    remaining = Integer(required=True)
