# site_content/models/gallery_image.py

import uuid

from django.db import models
from django.utils import timezone


def _new_image_id() -> str:
    return str(uuid.uuid4())


class GalleryImage(models.Model):
    """
    One tile of the storefront gallery page. The admin saves the whole
    gallery at once; `position` is the display order.
    """

    id = models.CharField(primary_key=True, max_length=64, default=_new_image_id)
    image_url = models.URLField(max_length=2000)
    alt_text = models.CharField(max_length=255, blank=True, default="")
    is_active = models.BooleanField(default=True)
    position = models.IntegerField(default=0)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["position", "created_at"]

    def __str__(self):
        return self.alt_text or self.image_url
