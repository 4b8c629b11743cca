# categories/models/category.py

import uuid

from django.db import models


def _new_category_id() -> str:
    return str(uuid.uuid4())


class Category(models.Model):
    """
    A storefront shelf (Ring Dishes, Ornaments, ...).

    Products reference a category by name or slug in their free-text
    `category` column; there is no foreign key, so deleting a category
    reassigns matching products explicitly.

    "Other Items" (id/slug "other-items") always exists and cannot be deleted.
    """

    OTHER_ITEMS_ID = "other-items"
    OTHER_ITEMS_NAME = "Other Items"
    OTHER_ITEMS_SLUG = "other-items"

    id = models.CharField(
        primary_key=True, max_length=64, default=_new_category_id, editable=False
    )
    name = models.CharField(max_length=120)
    slug = models.SlugField(max_length=120)
    image_url = models.URLField(max_length=2000, blank=True, default="")
    hero_image_url = models.URLField(max_length=2000, blank=True, default="")
    show_on_homepage = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name

    @property
    def is_other_items(self) -> bool:
        return self.slug == self.OTHER_ITEMS_SLUG
