# public/services/exceptions.py

"""
PAYMENT / CHECKOUT SERVICE ERRORS

Every error carries the HTTP status the view should answer with, a short
error message and optional detail. Views render {"error", "detail"}.
"""

from __future__ import annotations


class PaymentServiceError(Exception):
    """Base exception for checkout and payment-provider failures."""

    status_code = 500

    def __init__(self, error: str, *, detail=None):
        self.error = error
        self.detail = detail
        super().__init__(error if detail is None else f"{error}: {detail}")


class CheckoutValidationError(PaymentServiceError):
    """Raised when the requested cart cannot be bought."""

    status_code = 400


class ProductNotFoundError(PaymentServiceError):
    """Raised when a cart line references an unknown product."""

    status_code = 404


class PaymentProviderError(PaymentServiceError):
    """Raised when the payment provider rejects or fails a request."""

    status_code = 500


class WebhookSignatureError(PaymentServiceError):
    """Raised when a webhook payload fails signature verification."""

    status_code = 400
