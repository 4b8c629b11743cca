# custom_orders/services/orders.py

"""
CUSTOM ORDER WRITES (admin)

- create: display id minted in the insert's transaction
- update: partial; flipping to paid stamps paid_at once
- messageId is an optional reference: unknown ids are dropped, not enforced
- webhook: a completed payment-link checkout marks the order paid
"""

from __future__ import annotations

import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from custom_orders.models import CustomOrder
from custom_orders.services.display_ids import create_custom_order
from custom_orders.services.exceptions import (
    CustomOrderNotFoundError,
    CustomOrderValidationError,
)
from inbox.models import Message

logger = logging.getLogger(__name__)


def _resolve_message_id(message_id):
    if not message_id:
        return None
    if Message.objects.filter(id=message_id).exists():
        return message_id
    logger.warning("Custom order references unknown message", extra={"message_id": str(message_id)})
    return None


def create_from_admin(fields: dict) -> CustomOrder:
    fields = dict(fields)
    fields["message_id"] = _resolve_message_id(fields.get("message_id"))

    if fields.get("status") == CustomOrder.STATUS_PAID:
        fields.setdefault("paid_at", timezone.now())

    return create_custom_order(**fields)


@transaction.atomic
def update_from_admin(order_id, changes: dict) -> CustomOrder:
    if not changes:
        raise CustomOrderValidationError("No fields to update")

    order = CustomOrder.objects.select_for_update().filter(id=order_id).first()
    if order is None:
        raise CustomOrderNotFoundError()

    if "message_id" in changes:
        changes["message_id"] = _resolve_message_id(changes["message_id"])

    touched = []
    for name, value in changes.items():
        if name == "status":
            continue
        setattr(order, name, value)
        touched.append(name)

    status = changes.get("status")
    if status == CustomOrder.STATUS_PAID:
        touched.extend(order.mark_paid())
    elif status is not None and order.status != status:
        order.status = status
        touched.append("status")

    if touched:
        order.save(update_fields=sorted(set(touched)))

    logger.info(
        "Custom order updated",
        extra={"custom_order_id": str(order.id), "fields": sorted(set(touched))},
    )
    return order


def _checkout_shipping(session: dict) -> tuple[str, dict, str]:
    collected = session.get("collected_information") or {}
    shipping = collected.get("shipping_details") or session.get("shipping_details") or {}
    customer = session.get("customer_details") or {}
    name = shipping.get("name") or customer.get("name") or ""
    return str(name), shipping.get("address") or {}, str(customer.get("phone") or "")


@transaction.atomic
def mark_paid_from_checkout(*, session: dict) -> CustomOrder | None:
    """
    Webhook side of the payment link: flip to paid, keep the payment
    intent and the shipping address the customer entered.
    Unknown orders are logged and skipped (a retry would not help).
    """
    metadata = session.get("metadata") or {}
    order_id = metadata.get("customOrderId")
    session_id = str(session.get("id") or "")

    queryset = CustomOrder.objects.select_for_update()
    order = None
    if order_id:
        try:
            order = queryset.filter(id=order_id).first()
        except (ValueError, ValidationError):
            order = None
    if order is None and session_id:
        order = queryset.filter(stripe_session_id=session_id).first()

    if order is None:
        logger.warning(
            "Paid checkout references unknown custom order",
            extra={"custom_order_id": order_id, "session_id": session_id},
        )
        return None

    touched = order.mark_paid()

    intent = session.get("payment_intent")
    intent_id = intent.get("id") if isinstance(intent, dict) else intent
    if intent_id:
        order.stripe_payment_intent_id = str(intent_id)
        touched.append("stripe_payment_intent_id")
    if session_id and not order.stripe_session_id:
        order.stripe_session_id = session_id
        touched.append("stripe_session_id")

    name, address, phone = _checkout_shipping(session)
    shipping = {
        "shipping_name": name,
        "shipping_line1": address.get("line1"),
        "shipping_line2": address.get("line2"),
        "shipping_city": address.get("city"),
        "shipping_state": address.get("state"),
        "shipping_postal_code": address.get("postal_code"),
        "shipping_country": address.get("country"),
        "shipping_phone": phone,
    }
    for attr, value in shipping.items():
        if value:
            setattr(order, attr, str(value))
            touched.append(attr)

    if touched:
        order.save(update_fields=sorted(set(touched)))

    logger.info(
        "Custom order paid",
        extra={"custom_order_id": str(order.id), "session_id": session_id},
    )
    return order
