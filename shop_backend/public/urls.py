# public/urls.py
"""
STOREFRONT PAYMENT URLS

Mounted in backend/urls.py:
    /api/checkout/...
    /api/webhooks/...
"""

from __future__ import annotations

from django.urls import path

from public.views.checkout import CheckoutSessionCreateView, CheckoutSessionDetailView
from public.views.stripe_webhook import StripeWebhookView

checkout_urlpatterns = [
    path("create-session/", CheckoutSessionCreateView.as_view(), name="checkout-create-session"),
    path("session/<str:session_id>/", CheckoutSessionDetailView.as_view(), name="checkout-session-detail"),
]

webhook_urlpatterns = [
    path("stripe/", StripeWebhookView.as_view(), name="stripe-webhook"),
]
