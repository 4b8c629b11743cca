# public/services/checkout.py

"""
STOREFRONT CART CHECKOUT (embedded Stripe session)

Flow:
1) config check (STRIPE_SECRET_KEY)
2) resolve + validate every cart line against the catalog
3) build inline price_data line items + flat shipping line
4) create the embedded session; the cart rides along in metadata

GUARANTEES:
- no session is created when any line fails validation
- prices always come from the catalog, never from the client
- one-off pieces are always bought with quantity 1
"""

from __future__ import annotations

import logging
import time
from collections import OrderedDict

from django.conf import settings
from django.db.models import Q

from backend.config import require_settings
from orders.services.cart_metadata import CartLine, CartMetadataError, encode_cart
from products.models import Product
from public.services.exceptions import (
    CheckoutValidationError,
    PaymentProviderError,
    ProductNotFoundError,
)
from public.services.stripe_gateway import (
    create_checkout_session,
    field,
    object_id,
    retrieve_checkout_session,
)

logger = logging.getLogger(__name__)

CURRENCY = "usd"
SHIPPING_COUNTRIES = ["US", "CA"]
METADATA_KIND = "cart"

# Stripe refuses expires_at sooner than 30 minutes out.
MIN_SESSION_TTL_MINUTES = 30


def _requested_lines(items) -> "OrderedDict[str, int]":
    if not isinstance(items, list) or not items:
        raise CheckoutValidationError("items is required")

    requested: OrderedDict[str, int] = OrderedDict()
    for raw in items:
        if not isinstance(raw, dict):
            raise CheckoutValidationError("Each item must be an object")
        product_id = str(raw.get("productId") or "").strip()
        if not product_id:
            raise CheckoutValidationError("productId is required")
        try:
            quantity = max(1, int(raw.get("quantity") or 1))
        except (TypeError, ValueError):
            raise CheckoutValidationError(f"Invalid quantity for {product_id}")
        requested[product_id] = requested.get(product_id, 0) + quantity
    return requested


def _resolve_product(product_id: str) -> Product:
    product = (
        Product.objects.filter(Q(id=product_id) | Q(stripe_product_id=product_id))
        .order_by("-created_at")
        .first()
    )
    if product is None:
        raise ProductNotFoundError(f"Product {product_id} not found")
    return product


def _checked_quantity(product: Product, requested: int) -> int:
    reason = product.availability_error()
    if reason:
        raise CheckoutValidationError(reason)

    if product.is_one_off:
        return 1

    if product.tracks_stock and requested > product.quantity_available:
        raise CheckoutValidationError(
            f"Requested quantity exceeds available inventory for {product.name}"
        )
    return requested


def _price_line(name: str, amount_cents: int, quantity: int, image_url: str = "") -> dict:
    product_data = {"name": name}
    if image_url:
        product_data["images"] = [image_url]
    return {
        "price_data": {
            "currency": CURRENCY,
            "product_data": product_data,
            "unit_amount": int(amount_cents),
        },
        "quantity": int(quantity),
    }


def build_cart(items) -> list[tuple[Product, CartLine]]:
    cart = []
    for product_id, requested in _requested_lines(items).items():
        product = _resolve_product(product_id)
        quantity = _checked_quantity(product, requested)
        cart.append(
            (product, CartLine(product.id, quantity, int(product.price_cents)))
        )
    return cart


def create_cart_checkout_session(items) -> dict:
    """
    -> {"clientSecret", "sessionId"}
    """
    require_settings("STRIPE_SECRET_KEY")

    cart = build_cart(items)

    try:
        encoded = encode_cart([line for _, line in cart])
    except CartMetadataError as exc:
        raise CheckoutValidationError(str(exc)) from exc

    require_settings("PUBLIC_SITE_URL")
    site = settings.PUBLIC_SITE_URL.rstrip("/")
    ttl = max(MIN_SESSION_TTL_MINUTES, int(settings.CHECKOUT_SESSION_TTL_MINUTES))

    line_items = [
        _price_line(product.name, line.price_cents, line.quantity, product.image_url)
        for product, line in cart
    ]
    line_items.append(_price_line("Shipping", int(settings.SHIPPING_FLAT_CENTS), 1))

    session = create_checkout_session(
        mode="payment",
        ui_mode="embedded",
        line_items=line_items,
        return_url=f"{site}/checkout/return?session_id={{CHECKOUT_SESSION_ID}}",
        expires_at=int(time.time()) + ttl * 60,
        shipping_address_collection={"allowed_countries": SHIPPING_COUNTRIES},
        metadata={"kind": METADATA_KIND, "items": encoded},
    )

    session_id = str(field(session, "id") or "")
    client_secret = field(session, "client_secret")
    if not client_secret:
        logger.error("Checkout session missing client_secret", extra={"session_id": session_id})
        raise PaymentProviderError("Unable to create checkout session")

    logger.info(
        "Cart checkout session created",
        extra={"session_id": session_id, "lines": len(cart)},
    )
    return {"clientSecret": client_secret, "sessionId": session_id}


def _line_item_summary(item) -> dict:
    price = field(item, "price")
    product = field(price, "product")
    if product is not None and not isinstance(product, str):
        name = field(product, "name")
    else:
        name = product
    return {
        "productName": name or field(item, "description") or "Item",
        "quantity": int(field(item, "quantity") or 0),
        "lineTotal": int(field(item, "amount_total") or 0),
    }


def _plain(value) -> dict | None:
    if value is None:
        return None
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return dict(value)


def _session_shipping(session) -> dict:
    collected = field(session, "collected_information")
    shipping = (
        field(collected, "shipping_details")
        or field(session, "shipping_details")
        or field(session, "shipping")
    )
    address = field(shipping, "address")
    return {
        "name": field(shipping, "name"),
        "address": _plain(address),
    }


def _session_card_last4(session) -> str | None:
    intent = field(session, "payment_intent")
    if intent is None or isinstance(intent, str):
        return None
    card = field(field(intent, "payment_method"), "card")
    return field(card, "last4")


def checkout_session_summary(session_id: str) -> dict:
    """
    Return-page summary:
    {id, amountTotal, currency, customerEmail, shipping, lineItems, cardLast4}
    """
    session_id = (session_id or "").strip()
    if not session_id:
        raise CheckoutValidationError("session id is required")

    session = retrieve_checkout_session(
        session_id,
        expand=["line_items.data.price.product", "payment_intent.payment_method"],
    )

    line_items = field(field(session, "line_items"), "data") or []
    customer = field(session, "customer_details")

    return {
        "id": object_id(session),
        "amountTotal": field(session, "amount_total"),
        "currency": field(session, "currency"),
        "customerEmail": field(customer, "email"),
        "shipping": _session_shipping(session),
        "lineItems": [_line_item_summary(item) for item in line_items],
        "cardLast4": _session_card_last4(session),
    }
