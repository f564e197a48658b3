"""Domain events for the Customer aggregate."""

from protean.fields import Float, Identifier

from storefront.domain import storefront


@storefront.event(part_of="Customer")
class BalanceDeducted:
    """A checkout total was paid from the customer's balance."""

    __version__ = "v1"

    customer_id = Identifier(required=True)
    amount = Float(required=True)
    balance = Float(required=True)
