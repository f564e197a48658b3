"""Receipt values produced by a completed checkout, and their console rendering.

The values carry exact decimals. Rendering rounds them for display only.
"""

from dataclasses import dataclass
from decimal import Decimal

from storefront.money import round_half_up
from storefront.shipping.calculator import ShipmentManifest


@dataclass(frozen=True)
class ReceiptLine:
    quantity: int
    name: str
    line_total: Decimal


@dataclass(frozen=True)
class Receipt:
    lines: tuple[ReceiptLine, ...]
    subtotal: Decimal
    shipping_fee: Decimal
    total_amount: Decimal
    resulting_balance: Decimal
    manifest: ShipmentManifest


def _whole(amount: Decimal) -> str:
    return str(round_half_up(amount))


def render_manifest(manifest: ShipmentManifest) -> list[str]:
    if not manifest:
        return []
    lines = ["** Shipment notice **"]
    lines.extend(f"{entry.label} {entry.weight_grams}g" for entry in manifest.entries)
    lines.append(f"Total package weight {manifest.total_weight_kg}kg")
    return lines


def render_receipt(receipt: Receipt) -> list[str]:
    lines = ["** Checkout receipt **"]
    lines.extend(f"{line.quantity}x {line.name} {_whole(line.line_total)}" for line in receipt.lines)
    lines.extend(
        [
            "----------------------",
            f"Subtotal {_whole(receipt.subtotal)}",
            f"Shipping {_whole(receipt.shipping_fee)}",
            f"Amount {_whole(receipt.total_amount)}",
            f"Customer balance after payment: {round_half_up(receipt.resulting_balance, 2)}",
        ]
    )
    return lines
