# site_content/services/exceptions.py

"""
SITE CONTENT SERVICE ERRORS
"""

from __future__ import annotations


class SiteContentError(Exception):
    """Rejected site content update (always a 400)."""

    status_code = 400

    def __init__(self, error: str, *, detail=None):
        self.error = error
        self.detail = detail
        super().__init__(error)
