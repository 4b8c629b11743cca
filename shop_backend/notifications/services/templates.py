# notifications/services/templates.py

"""
PAYMENT-LINK EMAIL RENDERER

Pure functions: same params -> same output.

Rules:
- All interpolated user content is HTML-escaped (Django autoescape)
- Money is "$" + two decimals of cents/100; missing/non-finite -> $0.00
- Shipping defaults to 0 when missing, negative or non-finite
- Total = subtotal + shipping
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from django.template.loader import render_to_string

HTML_TEMPLATE = "notifications/payment_link_email.html"
DEFAULT_BRAND = "The Chesapeake Shell"


@dataclass(frozen=True)
class PaymentLinkEmail:
    brand_name: str
    cta_url: str
    amount_cents: int | float | None
    order_label: str | None = None
    currency: str = "usd"
    shipping_cents: int | float | None = None
    thumbnail_url: str | None = None
    description: str | None = None


def _finite_number(value) -> float | None:
    if value is None or isinstance(value, bool) or not isinstance(value, Real):
        return None
    value = float(value)
    if not math.isfinite(value):
        return None
    return value


def format_money(cents) -> str:
    value = _finite_number(cents)
    dollars = value / 100 if value is not None else 0.0
    return f"${dollars:.2f}"


def _totals(params: PaymentLinkEmail) -> tuple[float, float, float]:
    subtotal = _finite_number(params.amount_cents) or 0.0
    shipping = _finite_number(params.shipping_cents)
    if shipping is None or shipping < 0:
        shipping = 0.0
    return subtotal, shipping, subtotal + shipping


def _item_label(params: PaymentLinkEmail) -> str:
    if params.order_label:
        return f"Custom Order {params.order_label}"
    return "Custom Order"


def render_payment_link_email_html(params: PaymentLinkEmail) -> str:
    subtotal, shipping, total = _totals(params)
    context = {
        "brand": params.brand_name or "Order",
        "order_label": params.order_label or "",
        "cta_url": params.cta_url,
        "item_label": _item_label(params),
        "thumbnail_url": params.thumbnail_url or "",
        "note": (params.description or "").strip(),
        "subtotal": format_money(subtotal),
        "shipping": format_money(shipping),
        "total": format_money(total),
    }
    return render_to_string(HTML_TEMPLATE, context)


def render_payment_link_email_text(params: PaymentLinkEmail) -> str:
    subtotal, shipping, total = _totals(params)
    lines = [
        f"{params.brand_name or DEFAULT_BRAND} Custom Order Payment",
        f"Order: {params.order_label}" if params.order_label else None,
        f"Details: {params.description}" if params.description else None,
        f"Subtotal: {format_money(subtotal)}",
        f"Shipping: {format_money(shipping)}",
        f"Total: {format_money(total)}",
        f"Pay Now: {params.cta_url}",
    ]
    return "\n".join(line for line in lines if line)
