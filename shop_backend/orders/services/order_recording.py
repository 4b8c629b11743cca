# orders/services/order_recording.py

"""
PAID CHECKOUT -> ORDER

Called by the payment webhook once a hosted cart session completes.

GUARANTEES:
- Idempotent per provider session id (webhook retries are harmless)
- Line prices come from the session metadata snapshot, not today's catalog
- Product stock is decremented under row locks in the same transaction
"""

from __future__ import annotations

import logging

from django.db import transaction

from orders.models import Order, OrderItem
from orders.services.cart_metadata import decode_cart
from orders.services.display_ids import next_order_display_id
from products.models import Product

logger = logging.getLogger(__name__)


def _shipping_details(session: dict) -> dict:
    collected = session.get("collected_information") or {}
    return collected.get("shipping_details") or session.get("shipping_details") or {}


def _card_details(session: dict) -> dict:
    # Present only when the session was fetched with the payment intent's
    # latest charge expanded; a bare id string yields nothing.
    intent = session.get("payment_intent")
    if not isinstance(intent, dict):
        return {}
    charge = intent.get("latest_charge")
    if not isinstance(charge, dict):
        return {}
    return (charge.get("payment_method_details") or {}).get("card") or {}


def _payment_intent_id(session: dict) -> str:
    intent = session.get("payment_intent")
    if isinstance(intent, dict):
        return str(intent.get("id") or "")
    return str(intent or "")


@transaction.atomic
def record_paid_checkout(*, session: dict, card: dict | None = None) -> Order:
    session_id = str(session.get("id") or "").strip()
    if not session_id:
        raise ValueError("Checkout session has no id")

    existing = Order.objects.filter(stripe_session_id=session_id).first()
    if existing:
        logger.info("Order already recorded", extra={"session_id": session_id})
        return existing

    metadata = session.get("metadata") or {}
    lines = decode_cart(metadata.get("items"))

    shipping = _shipping_details(session)
    customer = session.get("customer_details") or {}
    totals = session.get("total_details") or {}
    card = card or _card_details(session)

    order = Order.objects.create(
        display_order_id=next_order_display_id(),
        stripe_session_id=session_id,
        stripe_payment_intent_id=_payment_intent_id(session),
        total_cents=int(session.get("amount_total") or 0),
        shipping_cents=int(totals.get("amount_shipping") or 0),
        customer_email=str(customer.get("email") or session.get("customer_email") or ""),
        shipping_name=str(shipping.get("name") or customer.get("name") or ""),
        shipping_address=shipping.get("address") or None,
        card_last4=str(card.get("last4") or "")[:4],
        card_brand=str(card.get("brand") or "")[:32],
    )

    products = Product.objects.select_for_update().in_bulk(
        [line.product_id for line in lines]
    )

    for line in lines:
        product = products.get(line.product_id)
        OrderItem.objects.create(
            order=order,
            product=product,
            quantity=line.quantity,
            price_cents=line.price_cents,
        )
        if product is None:
            logger.warning(
                "Paid line references unknown product",
                extra={"session_id": session_id, "product_id": line.product_id},
            )
            continue

        product.record_sale(line.quantity)
        product.save(update_fields=["quantity_available", "is_sold"])

    logger.info(
        "Order recorded from checkout",
        extra={"session_id": session_id, "order_id": str(order.id), "lines": len(lines)},
    )
    return order
