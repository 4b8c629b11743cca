# public/services/webhooks.py

"""
STRIPE WEBHOOK DISPATCH

Handled:
- checkout.session.completed (paid)
    metadata.kind == "custom_order" -> custom order marked paid
    anything else                   -> orders.Order recorded, stock decremented

Every other event type is acknowledged and ignored.
"""

from __future__ import annotations

import logging

from custom_orders.services.orders import mark_paid_from_checkout
from orders.services.order_recording import record_paid_checkout
from public.services.stripe_gateway import object_id, retrieve_card_summary

logger = logging.getLogger(__name__)

CHECKOUT_COMPLETED = "checkout.session.completed"
PAID_STATUSES = {"paid", "no_payment_required"}
CUSTOM_ORDER_KIND = "custom_order"


def handle_stripe_event(event: dict) -> str:
    """
    Apply a verified event. Returns what was done (for logs/tests):
    "ignored", "custom_order" or "order".
    """
    event_type = event.get("type")
    event_id = event.get("id")

    if event_type != CHECKOUT_COMPLETED:
        logger.info("Stripe event ignored", extra={"event_id": event_id, "type": event_type})
        return "ignored"

    session = (event.get("data") or {}).get("object") or {}
    session_id = session.get("id")

    payment_status = session.get("payment_status")
    if payment_status and payment_status not in PAID_STATUSES:
        logger.info(
            "Checkout completed without payment",
            extra={"session_id": session_id, "payment_status": payment_status},
        )
        return "ignored"

    metadata = session.get("metadata") or {}
    if metadata.get("kind") == CUSTOM_ORDER_KIND or metadata.get("customOrderId"):
        mark_paid_from_checkout(session=session)
        return "custom_order"

    card = retrieve_card_summary(object_id(session.get("payment_intent")))
    record_paid_checkout(session=session, card=card)
    return "order"
