# public/services/stripe_gateway.py

"""
STRIPE GATEWAY

Thin wrapper over the stripe SDK:
- credentials/API version come from settings.PAYMENTS["STRIPE"]
- SDK errors are re-raised as PaymentProviderError (provider message kept)
- webhook payloads are verified before anything reads them
"""

from __future__ import annotations

import json
import logging
from typing import Any

import stripe
from django.conf import settings

from backend.config import require_settings
from public.services.exceptions import PaymentProviderError, WebhookSignatureError

logger = logging.getLogger(__name__)


def _stripe_cfg() -> dict:
    payments = getattr(settings, "PAYMENTS", {}) or {}
    cfg = payments.get("STRIPE") if isinstance(payments, dict) else None
    return cfg if isinstance(cfg, dict) else {}


def _configure() -> None:
    require_settings("STRIPE_SECRET_KEY")
    cfg = _stripe_cfg()
    stripe.api_key = cfg["SECRET_KEY"]
    if cfg.get("API_VERSION"):
        stripe.api_version = cfg["API_VERSION"]


def field(obj, name: str, default=None):
    """
    Read a key from a StripeObject or a plain dict (webhook payloads).
    """
    if obj is None:
        return default
    if isinstance(obj, dict):
        return obj.get(name, default)
    return getattr(obj, name, default)


def _provider_message(exc: Exception) -> str:
    return getattr(exc, "user_message", None) or str(exc) or exc.__class__.__name__


def create_checkout_session(**params) -> Any:
    _configure()
    try:
        session = stripe.checkout.Session.create(**params)
    except stripe.StripeError as exc:
        logger.error(
            "Stripe checkout session create failed",
            extra={"error": _provider_message(exc)},
        )
        raise PaymentProviderError(
            "Failed to create checkout session", detail=_provider_message(exc)
        ) from exc

    logger.info("Stripe checkout session created", extra={"session_id": field(session, "id")})
    return session


def retrieve_checkout_session(session_id: str, *, expand: list[str] | None = None) -> Any:
    _configure()
    try:
        return stripe.checkout.Session.retrieve(session_id, expand=expand or [])
    except stripe.StripeError as exc:
        logger.error(
            "Stripe checkout session retrieve failed",
            extra={"session_id": session_id, "error": _provider_message(exc)},
        )
        raise PaymentProviderError(
            "Failed to load checkout session", detail=_provider_message(exc)
        ) from exc


def retrieve_card_summary(payment_intent_id: str) -> dict:
    """
    {last4, brand} of the card that paid `payment_intent_id`, or {}.
    Best-effort: a lookup failure only costs the admin the card columns.
    """
    if not payment_intent_id:
        return {}

    _configure()
    try:
        intent = stripe.PaymentIntent.retrieve(
            payment_intent_id, expand=["latest_charge"]
        )
    except stripe.StripeError as exc:
        logger.warning(
            "Card summary lookup failed",
            extra={"payment_intent_id": payment_intent_id, "error": _provider_message(exc)},
        )
        return {}

    details = field(field(intent, "latest_charge"), "payment_method_details")
    card = field(details, "card")
    if card is None:
        return {}
    return {"last4": field(card, "last4") or "", "brand": field(card, "brand") or ""}


def verify_webhook_event(*, payload: bytes, signature: str | None) -> dict:
    """
    Verify the Stripe-Signature header and return the event as a plain dict.
    """
    require_settings("STRIPE_WEBHOOK_SECRET")
    secret = _stripe_cfg()["WEBHOOK_SECRET"]

    if not signature:
        raise WebhookSignatureError("Missing Stripe-Signature header")

    try:
        stripe.Webhook.construct_event(payload, signature, secret)
    except (ValueError, stripe.SignatureVerificationError) as exc:
        raise WebhookSignatureError("Invalid webhook signature", detail=str(exc)) from exc

    return json.loads(payload.decode("utf-8"))


def object_id(value) -> str:
    """
    Id of a possibly-expanded reference (string id or expanded object).
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(field(value, "id") or "")


def create_product_with_price(
    *, name: str, description: str, unit_amount: int, currency: str, metadata: dict
) -> tuple[str, str]:
    """
    Create a Stripe product and its one-time price; returns (product_id, price_id).
    """
    _configure()
    try:
        product = stripe.Product.create(
            name=name,
            description=description or None,
            metadata=metadata,
        )
        price = stripe.Price.create(
            product=field(product, "id"),
            unit_amount=unit_amount,
            currency=currency,
        )
    except stripe.StripeError as exc:
        logger.error(
            "Stripe product create failed",
            extra={"product": metadata, "error": _provider_message(exc)},
        )
        raise PaymentProviderError(
            "Failed to create Stripe product and price.", detail=_provider_message(exc)
        ) from exc

    logger.info(
        "Stripe product created",
        extra={"stripe_product_id": field(product, "id"), "stripe_price_id": field(price, "id")},
    )
    return field(product, "id"), field(price, "id")
