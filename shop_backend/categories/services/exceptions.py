# categories/services/exceptions.py

"""
CATEGORY SERVICE ERRORS

Each error carries the HTTP status the admin API answers with.
"""

from __future__ import annotations


class CategoryError(Exception):
    status_code = 400

    def __init__(self, error: str, *, detail=None):
        self.error = error
        self.detail = detail
        super().__init__(error)


class CategoryValidationError(CategoryError):
    status_code = 400


class CategoryNotFoundError(CategoryError):
    status_code = 404

    def __init__(self, error: str = "Category not found", *, detail=None):
        super().__init__(error, detail=detail)
