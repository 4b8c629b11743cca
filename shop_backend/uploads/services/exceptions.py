# uploads/services/exceptions.py

"""
IMAGE UPLOAD ERRORS

status_code is the HTTP answer: 400 bad form, 413 too large, 415 wrong type,
500 storage failure.
"""

from __future__ import annotations


class UploadError(Exception):
    """Base exception for image upload failures."""

    status_code = 400

    def __init__(self, error: str, *, detail=None):
        self.error = error
        self.detail = detail
        super().__init__(error if detail is None else f"{error}: {detail}")


class InvalidUploadError(UploadError):
    status_code = 400


class UploadTooLargeError(UploadError):
    status_code = 413

    def __init__(self, error: str = "Upload too large", *, detail="Max 8MB allowed"):
        super().__init__(error, detail=detail)


class UnsupportedImageTypeError(UploadError):
    status_code = 415


class StorageWriteError(UploadError):
    status_code = 500
