# custom_orders/services/payment_link.py

"""
SEND PAYMENT LINK (custom orders)

Flow:
1) config check (Stripe + Resend + public site URL)
2) load order; amount > 0 and customer email required
3) hosted checkout session: amount + flat shipping, US shipping address
4) persist payment_link + stripe_session_id
5) render + send the payment-link email

The email result is reported, not raised: once step 4 commits the link
exists and the admin can resend or copy it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import quote

from django.conf import settings

from backend.config import require_settings
from custom_orders.models import CustomOrder
from custom_orders.services.exceptions import (
    CustomOrderNotFoundError,
    CustomOrderValidationError,
    PaymentLinkError,
)
from notifications.services.mailer import send_email
from notifications.services.templates import (
    PaymentLinkEmail,
    render_payment_link_email_html,
    render_payment_link_email_text,
)
from public.services.stripe_gateway import create_checkout_session, field

logger = logging.getLogger(__name__)

CURRENCY = "usd"
SHIPPING_COUNTRIES = ["US"]
METADATA_KIND = "custom_order"


@dataclass(frozen=True)
class PaymentLinkResult:
    payment_link: str
    session_id: str
    email_ok: bool


def _line_item(name: str, amount_cents: int, description: str | None = None) -> dict:
    product_data = {"name": name}
    if description:
        product_data["description"] = description
    return {
        "price_data": {
            "currency": CURRENCY,
            "product_data": product_data,
            "unit_amount": int(amount_cents),
        },
        "quantity": 1,
    }


def email_subject() -> str:
    return f"{settings.BRAND_NAME} Custom Order Payment"


def send_payment_link(*, order_id) -> PaymentLinkResult:
    require_settings("STRIPE_SECRET_KEY", "RESEND_API_KEY")

    order = CustomOrder.objects.filter(id=order_id).first()
    if order is None:
        raise CustomOrderNotFoundError()

    amount = int(order.amount or 0)
    if amount <= 0:
        raise CustomOrderValidationError("Custom order amount is missing or zero")

    customer_email = (order.customer_email or "").strip()
    if not customer_email:
        raise CustomOrderValidationError("Custom order missing customer email")

    require_settings("PUBLIC_SITE_URL")
    site = settings.PUBLIC_SITE_URL.rstrip("/")
    shipping_cents = int(settings.SHIPPING_FLAT_CENTS)
    label = order.label

    session = create_checkout_session(
        mode="payment",
        customer_email=customer_email,
        shipping_address_collection={"allowed_countries": SHIPPING_COUNTRIES},
        phone_number_collection={"enabled": True},
        line_items=[
            _line_item(f"Custom Order {label}", amount, order.description or None),
            _line_item("Shipping", shipping_cents),
        ],
        success_url=f"{site}/checkout/return?session_id={{CHECKOUT_SESSION_ID}}",
        cancel_url=f"{site}/shop?customOrderCanceled=1&co={quote(label, safe='')}",
        metadata={
            "customOrderId": str(order.id),
            "customOrderDisplayId": label,
            "source": METADATA_KIND,
            "kind": METADATA_KIND,
        },
    )

    session_id = str(field(session, "id") or "")
    url = str(field(session, "url") or "")
    if not url:
        logger.error("Payment link session missing url", extra={"session_id": session_id})
        raise PaymentLinkError("Failed to create payment link", detail="No session URL returned")

    order.payment_link = url
    order.stripe_session_id = session_id
    order.save(update_fields=["payment_link", "stripe_session_id"])

    params = PaymentLinkEmail(
        brand_name=settings.BRAND_NAME,
        order_label=label,
        cta_url=url,
        amount_cents=amount,
        currency=CURRENCY,
        shipping_cents=shipping_cents,
        description=order.description or None,
    )
    html = render_payment_link_email_html(params)
    text = render_payment_link_email_text(params)

    result = send_email(to=customer_email, subject=email_subject(), html=html, text=text)
    if not result.ok:
        logger.error(
            "Payment link email failed",
            extra={"custom_order_id": str(order.id), "error": result.error},
        )

    logger.info(
        "Payment link sent",
        extra={
            "custom_order_id": str(order.id),
            "display_id": label,
            "session_id": session_id,
            "email_ok": result.ok,
        },
    )
    return PaymentLinkResult(payment_link=url, session_id=session_id, email_ok=result.ok)
