# site_content/services/home.py

"""
HOME CONTENT

- get_home_content(): upserts the singleton row ({} on first read)
- update_home_content(body): accepts {key, json} or {home}; validates image
  URLs; persists the object verbatim
"""

from __future__ import annotations

import logging

from django.db import transaction

from site_content.models import SiteContent
from site_content.services.exceptions import SiteContentError

logger = logging.getLogger(__name__)

MAX_IMAGE_URL_LENGTH = 2000
HERO_SLOTS = ("left", "middle", "right")


def get_home_content() -> SiteContent:
    content, created = SiteContent.objects.get_or_create(
        key=SiteContent.HOME_KEY, defaults={"json": {}}
    )
    if created:
        logger.info("Home content row created")
    return content


def is_invalid_image_url(value) -> bool:
    if not isinstance(value, str):
        return False
    return value.strip().lower().startswith("data:") or len(value) > MAX_IMAGE_URL_LENGTH


def _image_urls(content: dict) -> list:
    hero = content.get("heroImages")
    hero = hero if isinstance(hero, dict) else {}
    gallery = content.get("customOrderImages")
    gallery = gallery if isinstance(gallery, list) else []

    return [url for url in [*(hero.get(slot) for slot in HERO_SLOTS), *gallery] if url]


def _incoming(body) -> tuple[str, object]:
    if not isinstance(body, dict):
        raise SiteContentError("Invalid JSON")

    key = body.get("key") or SiteContent.HOME_KEY
    content = body.get("json")
    if content is None:
        content = body.get("home")
    return key, content


@transaction.atomic
def update_home_content(body) -> SiteContent:
    key, content = _incoming(body)

    if key != SiteContent.HOME_KEY:
        raise SiteContentError("Invalid key", detail="Only home content is supported.")
    if not isinstance(content, dict):
        raise SiteContentError(
            "Invalid payload", detail="Expected { key, json } or { home } object."
        )

    if any(is_invalid_image_url(url) for url in _image_urls(content)):
        raise SiteContentError(
            "invalid_image_url",
            detail="Image URLs must be normal URLs and under 2000 characters.",
        )

    row = get_home_content()
    row.json = content
    row.save(update_fields=["json", "updated_at"])

    logger.info("Home content updated", extra={"keys": sorted(content.keys())})
    return row
