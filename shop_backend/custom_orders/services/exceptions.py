# custom_orders/services/exceptions.py

"""
CUSTOM ORDER SERVICE ERRORS

Each error carries the HTTP status the admin API answers with.
"""

from __future__ import annotations


class CustomOrderServiceError(Exception):
    """Base exception for custom order failures."""

    status_code = 400

    def __init__(self, error: str, *, detail=None):
        self.error = error
        self.detail = detail
        super().__init__(error if detail is None else f"{error}: {detail}")


class CustomOrderValidationError(CustomOrderServiceError):
    """Raised when an order cannot be created/updated/charged as requested."""

    status_code = 400


class CustomOrderNotFoundError(CustomOrderServiceError):
    """Raised when the referenced custom order does not exist."""

    status_code = 404

    def __init__(self, error: str = "Not found", *, detail=None):
        super().__init__(error, detail=detail)


class PaymentLinkError(CustomOrderServiceError):
    """Raised when a payment link could not be produced or saved."""

    status_code = 500
