# site_content/services/gallery.py

"""
GALLERY

- list_gallery_images(include_hidden): position order, then creation time
- replace_gallery_images(images): the admin saves the whole gallery at once

Rules:
- entries without an imageUrl are skipped
- alt text comes from alt, falling back to title
- position defaults to the entry's index in the request
- any inline (data:) or oversize URL rejects the whole save; nothing is deleted
"""

from __future__ import annotations

import logging
from datetime import timezone as dt_timezone

from django.db import transaction
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from site_content.models import GalleryImage
from site_content.services.exceptions import SiteContentError
from site_content.services.home import is_invalid_image_url

logger = logging.getLogger(__name__)


def list_gallery_images(*, include_hidden: bool = False):
    images = GalleryImage.objects.order_by("position", "created_at")
    if not include_hidden:
        images = images.filter(is_active=True)
    return images


def _position(value, index: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return index
    return int(value)


def _created_at(value):
    parsed = parse_datetime(value) if isinstance(value, str) else None
    if parsed is None:
        return timezone.now()
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed, dt_timezone.utc)
    return parsed


def _rows(images) -> list[GalleryImage]:
    rows: list[GalleryImage] = []
    seen: set[str] = set()
    for index, entry in enumerate(images):
        if not isinstance(entry, dict):
            continue
        image_url = entry.get("imageUrl")
        if not isinstance(image_url, str) or not image_url.strip():
            continue
        if is_invalid_image_url(image_url):
            raise SiteContentError(
                "invalid_image_url",
                detail="Images must be uploaded first; only URLs allowed.",
            )

        row = GalleryImage(
            image_url=image_url.strip(),
            alt_text=str(entry.get("alt") or entry.get("title") or "")[:255],
            is_active=not entry.get("hidden"),
            position=_position(entry.get("position"), index),
            created_at=_created_at(entry.get("createdAt")),
        )
        # keep the client id unless it repeats or does not fit
        client_id = str(entry.get("id") or "")
        if client_id and len(client_id) <= 64 and client_id not in seen:
            row.id = client_id
        seen.add(row.id)
        rows.append(row)
    return rows


@transaction.atomic
def replace_gallery_images(body) -> list[GalleryImage]:
    if not isinstance(body, dict):
        raise SiteContentError("Invalid JSON")
    images = body.get("images")
    if not isinstance(images, list):
        images = []

    rows = _rows(images)
    GalleryImage.objects.all().delete()
    GalleryImage.objects.bulk_create(rows)

    logger.info("Gallery saved", extra={"count": len(rows)})
    return list(list_gallery_images(include_hidden=True))
