"""Decimal helpers for monetary amounts and weights.

Amounts live on Protean ``Float`` fields. Every computation converts them to
``Decimal`` through their shortest string form, so ``0.7 * 30`` is exactly 21.
"""

from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal

ZERO = Decimal("0")


def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if value is None:
        return ZERO
    return Decimal(str(value))


def ceil_to_unit(amount: Decimal) -> Decimal:
    """Round up to the next whole currency unit."""
    return amount.to_integral_value(rounding=ROUND_CEILING)


def round_half_up(amount: Decimal, places: int = 0) -> Decimal:
    return amount.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
