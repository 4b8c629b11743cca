# products/services/exceptions.py

"""
PRODUCT SERVICE ERRORS

Each error carries the HTTP status the admin API answers with.
"""

from __future__ import annotations


class ProductServiceError(Exception):
    status_code = 400

    def __init__(self, error: str, *, detail=None):
        self.error = error
        self.detail = detail
        super().__init__(error)


class ProductValidationError(ProductServiceError):
    status_code = 400


class InlineImageError(ProductServiceError):
    """Image bytes sent in place of an uploaded image's URL."""

    status_code = 413

    def __init__(self, error: str = "Images must be uploaded first; only URLs allowed.", *, detail=None):
        super().__init__(error, detail=detail)


class ProductNotFoundError(ProductServiceError):
    status_code = 404

    def __init__(self, error: str = "Product not found", *, detail=None):
        super().__init__(error, detail=detail)
