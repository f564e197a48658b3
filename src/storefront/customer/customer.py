"""Customer aggregate — a shopper with a spendable balance.

The balance never goes negative: the only mutation is ``deduct_balance``,
which refuses amounts larger than what is available.
"""

from decimal import Decimal

from protean.exceptions import ValidationError
from protean.fields import Float, String

from storefront.customer.events import BalanceDeducted
from storefront.domain import storefront
from storefront.exceptions import InsufficientBalance
from storefront.money import to_decimal


@storefront.aggregate
class Customer:
    name = String(required=True, max_length=255)
    balance = Float(default=0.0, min_value=0.0)

    @classmethod
    def register(cls, name, balance=0.0):
        return cls(name=name, balance=float(balance))

    def available_balance(self) -> Decimal:
        return to_decimal(self.balance)

    def can_afford(self, amount) -> bool:
        return to_decimal(amount) <= self.available_balance()

    def deduct_balance(self, amount):
        """Debit ``amount`` from the balance."""
        amount = to_decimal(amount)
        if amount < 0:
            raise ValidationError({"amount": ["Amount cannot be negative"]})
        if not self.can_afford(amount):
            raise InsufficientBalance()

        remaining = self.available_balance() - amount
        self.balance = float(remaining)

        self.raise_(
            BalanceDeducted(
                customer_id=str(self.id),
                amount=float(amount),
                balance=self.balance,
            )
        )
