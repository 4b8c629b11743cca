# uploads/services/images.py

"""
IMAGE UPLOAD -> OBJECT STORAGE

Key layout: <namespace>/<scope>/<YYYY>/<MM>/<uuid4>.<ext>
Public URL: PUBLIC_IMAGES_BASE_URL + "/" + key

Rules:
- declared Content-Length is checked before the body is parsed
- only JPEG / PNG / WEBP, at most 8 MiB
- storage is never touched for a rejected file
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime

from django.conf import settings
from django.core.files.storage import storages
from django.utils import timezone

from backend.config import missing_settings
from uploads.services.exceptions import (
    InvalidUploadError,
    StorageWriteError,
    UnsupportedImageTypeError,
    UploadTooLargeError,
)

logger = logging.getLogger(__name__)

MAX_UPLOAD_BYTES = 8 * 1024 * 1024

EXTENSIONS_BY_MIME = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
}

SCOPES = ("products", "gallery", "home", "categories")
DEFAULT_SCOPE = "products"

R2_SETTINGS = ("R2_ACCOUNT_ID", "R2_ACCESS_KEY_ID", "R2_SECRET_ACCESS_KEY", "R2_BUCKET")
STORAGE_ALIAS = "images"


@dataclass(frozen=True)
class StoredImage:
    id: str
    key: str
    url: str
    scope: str
    content_type: str
    size: int

    def as_payload(self) -> dict:
        return {
            "id": self.id,
            "key": self.key,
            "url": self.url,
            "scope": self.scope,
            "contentType": self.content_type,
            "size": self.size,
        }


def missing_upload_settings() -> list[str]:
    missing = missing_settings("PUBLIC_IMAGES_BASE_URL", "IMAGES_STORAGE")
    # R2 is all-or-nothing: a partial set means the bucket is misconfigured
    r2_missing = missing_settings(*R2_SETTINGS)
    if len(r2_missing) < len(R2_SETTINGS):
        missing.extend(r2_missing)
    return missing


def check_declared_length(raw_length) -> None:
    try:
        declared = int(raw_length)
    except (TypeError, ValueError):
        return
    if declared > MAX_UPLOAD_BYTES:
        raise UploadTooLargeError()


def pick_file(files):
    """
    `file` field first, else the first `files[]` entry.
    """
    upload = files.get("file")
    if upload is None:
        candidates = files.getlist("files[]") if hasattr(files, "getlist") else []
        upload = candidates[0] if candidates else None
    if upload is None:
        raise InvalidUploadError("Missing file field")
    return upload


def validate_image(upload) -> str:
    content_type = (getattr(upload, "content_type", "") or "").lower()
    ext = EXTENSIONS_BY_MIME.get(content_type)
    if ext is None:
        raise UnsupportedImageTypeError(
            "Unsupported image type", detail=content_type or "unknown"
        )
    if int(upload.size or 0) > MAX_UPLOAD_BYTES:
        raise UploadTooLargeError()
    return ext


def normalize_scope(raw) -> str:
    scope = (raw or "").strip().lower() or DEFAULT_SCOPE
    if scope not in SCOPES:
        raise InvalidUploadError("Invalid scope", detail=f"Expected one of: {', '.join(SCOPES)}")
    return scope


def build_key(scope: str, ext: str, *, image_id: str, now: datetime | None = None) -> str:
    now = timezone.localtime(now or timezone.now())
    namespace = (settings.IMAGES_KEY_NAMESPACE or "").strip("/")
    parts = [namespace, scope, f"{now.year:04d}", f"{now.month:02d}", f"{image_id}.{ext}"]
    return "/".join(part for part in parts if part)


def public_url(key: str) -> str:
    return f"{settings.PUBLIC_IMAGES_BASE_URL.rstrip('/')}/{key}"


def store_image(upload, *, scope: str) -> StoredImage:
    ext = validate_image(upload)
    image_id = str(uuid.uuid4())
    key = build_key(scope, ext, image_id=image_id)

    try:
        saved_key = storages[STORAGE_ALIAS].save(key, upload)
    except Exception as exc:
        logger.exception("Image storage write failed", extra={"key": key})
        raise StorageWriteError("Image upload failed", detail=str(exc)) from exc

    stored = StoredImage(
        id=image_id,
        key=saved_key,
        url=public_url(saved_key),
        scope=scope,
        content_type=upload.content_type,
        size=int(upload.size),
    )
    logger.info(
        "Image stored",
        extra={"key": saved_key, "scope": scope, "size": stored.size},
    )
    return stored
