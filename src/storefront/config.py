"""Checkout settings.

The shipping rate is the one tunable of the checkout. It is passed explicitly
to the shipping calculator; ``from_env`` reads an override from the process
environment the same way adapters elsewhere pick their implementation.
"""

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from protean.exceptions import ConfigurationError

DEFAULT_SHIPPING_RATE_PER_KG = Decimal("30.0")

SHIPPING_RATE_ENV_VAR = "STOREFRONT_SHIPPING_RATE_PER_KG"


@dataclass(frozen=True)
class CheckoutSettings:
    """Tunables for pricing a checkout."""

    shipping_rate_per_kg: Decimal = DEFAULT_SHIPPING_RATE_PER_KG

    def __post_init__(self):
        rate = self.shipping_rate_per_kg
        if not isinstance(rate, Decimal) or not rate.is_finite() or rate < 0:
            raise ConfigurationError(f"Shipping rate must be a non-negative decimal, got {rate!r}")

    @classmethod
    def from_env(cls, environ=None) -> "CheckoutSettings":
        environ = os.environ if environ is None else environ
        raw = environ.get(SHIPPING_RATE_ENV_VAR)
        if raw is None or not raw.strip():
            return cls()

        try:
            rate = Decimal(raw.strip())
        except InvalidOperation as exc:
            raise ConfigurationError(f"{SHIPPING_RATE_ENV_VAR} must be a number, got {raw!r}") from exc
        return cls(shipping_rate_per_kg=rate)
