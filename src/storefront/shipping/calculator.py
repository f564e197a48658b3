"""Weight-based shipping fee.

Every physical unit that needs shipping is one ``ShippableUnit``. The fee is a
function of total weight only: ``ceil(total_kg * rate_per_kg)``, rounded up to
a whole currency unit in the seller's favour, and zero when nothing ships.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal

from storefront.catalog.product import requires_shipping, shipping_weight
from storefront.config import DEFAULT_SHIPPING_RATE_PER_KG
from storefront.money import ZERO, ceil_to_unit, round_half_up, to_decimal

GRAMS_PER_KG = Decimal("1000")


@dataclass(frozen=True)
class ShippableUnit:
    """One physical item instance that has to be shipped."""

    label: str
    weight_kg: Decimal


@dataclass(frozen=True)
class ManifestEntry:
    label: str
    weight_grams: int


@dataclass(frozen=True)
class ShipmentManifest:
    """Per-unit shipment notice; reporting only, never part of the fee."""

    entries: tuple[ManifestEntry, ...]
    total_weight_kg: Decimal

    def __bool__(self) -> bool:
        return bool(self.entries)


def shippable_units(lines, products) -> list[ShippableUnit]:
    """Expand cart lines into one unit per shipped item.

    ``products`` maps product id to the catalog record of each line.
    """
    units = []
    for line in lines:
        product = products[str(line.product_id)]
        if not requires_shipping(product):
            continue
        weight = shipping_weight(product)
        units.extend(ShippableUnit(label=product.name, weight_kg=weight) for _ in range(line.quantity))
    return units


class ShippingCalculator:
    def __init__(self, rate_per_kg=DEFAULT_SHIPPING_RATE_PER_KG) -> None:
        rate = to_decimal(rate_per_kg)
        if rate < 0:
            raise ValueError("Shipping rate cannot be negative")
        self.rate_per_kg: Decimal = rate

    @classmethod
    def from_settings(cls, settings) -> "ShippingCalculator":
        return cls(rate_per_kg=settings.shipping_rate_per_kg)

    @staticmethod
    def total_weight(units: Iterable[ShippableUnit]) -> Decimal:
        return sum((to_decimal(unit.weight_kg) for unit in units), ZERO)

    def calculate_fee(self, units: Sequence[ShippableUnit]) -> Decimal:
        if not units:
            return ZERO

        total_weight = self.total_weight(units)
        return ceil_to_unit(total_weight * self.rate_per_kg)

    def manifest(self, units: Sequence[ShippableUnit]) -> ShipmentManifest:
        entries = tuple(
            ManifestEntry(
                label=unit.label,
                weight_grams=int(round_half_up(to_decimal(unit.weight_kg) * GRAMS_PER_KG)),
            )
            for unit in units
        )
        return ShipmentManifest(entries=entries, total_weight_kg=round_half_up(self.total_weight(units), 1))
