# orders/services/cart_metadata.py

"""
CART METADATA CODEC

The hosted checkout session carries the cart back to us through provider
metadata (string values, 500 chars max). Each line is encoded as
"<productId>:<quantity>:<unitPriceCents>" and lines are comma-joined.
"""

from __future__ import annotations

from dataclasses import dataclass

METADATA_VALUE_LIMIT = 500


class CartMetadataError(ValueError):
    """Raised when cart metadata cannot be encoded or decoded."""


@dataclass(frozen=True)
class CartLine:
    product_id: str
    quantity: int
    price_cents: int


def encode_cart(lines: list[CartLine]) -> str:
    encoded = ",".join(
        f"{line.product_id}:{int(line.quantity)}:{int(line.price_cents)}"
        for line in lines
    )
    if len(encoded) > METADATA_VALUE_LIMIT:
        raise CartMetadataError("Cart has too many distinct items for one checkout.")
    return encoded


def decode_cart(raw: str | None) -> list[CartLine]:
    lines: list[CartLine] = []
    for chunk in (raw or "").split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        parts = chunk.split(":")
        if len(parts) != 3:
            raise CartMetadataError(f"Malformed cart line: {chunk!r}")
        product_id, qty, price = parts
        try:
            lines.append(CartLine(product_id, int(qty), int(price)))
        except ValueError as exc:
            raise CartMetadataError(f"Malformed cart line: {chunk!r}") from exc
    return lines
