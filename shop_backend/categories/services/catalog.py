# categories/services/catalog.py

"""
CATEGORY CATALOG

- to_slug(): lowercase, runs of non-alphanumerics become "-", edges trimmed
- ordered_categories(): the four base shelves first (in shop order), then the
  rest by name, with Other Items always last
- ensure_other_items(): the fallback shelf exists after every call
- delete_category(): products on the deleted shelf move to Other Items

GUARANTEES:
- Other Items cannot be deleted
- Deleting a category and reassigning its products is all-or-nothing
"""

from __future__ import annotations

import logging
import re

from django.db import transaction

from categories.models import Category
from categories.services.exceptions import CategoryNotFoundError, CategoryValidationError
from products.models import Product

logger = logging.getLogger(__name__)

BASE_CATEGORY_ORDER = (
    ("Ring Dishes", "ring-dish"),
    ("Ornaments", "ornament"),
    ("Decor", "decor"),
    ("Wine Stoppers", "wine-stopper"),
)

LEGACY_OTHER_SLUGS = ("uncategorized",)

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def to_slug(value) -> str:
    return _NON_ALNUM.sub("-", str(value or "").strip().lower()).strip("-")


def _is_other_items(category: Category) -> bool:
    key = Category.OTHER_ITEMS_SLUG
    return to_slug(category.slug) == key or to_slug(category.name) == key


def ensure_other_items() -> Category:
    """
    Return the Other Items shelf, creating it (or renaming a legacy
    "Uncategorized" row) when missing.
    """
    for category in Category.objects.all():
        if _is_other_items(category):
            return category

    for category in Category.objects.all():
        if to_slug(category.slug) in LEGACY_OTHER_SLUGS:
            category.name = Category.OTHER_ITEMS_NAME
            category.slug = Category.OTHER_ITEMS_SLUG
            category.show_on_homepage = True
            category.save(update_fields=["name", "slug", "show_on_homepage"])
            moved = Product.objects.filter(category__iexact="uncategorized").update(
                category=Category.OTHER_ITEMS_SLUG
            )
            logger.info(
                "Legacy category renamed to Other Items",
                extra={"category_id": category.id, "products_moved": moved},
            )
            return category

    category, created = Category.objects.get_or_create(
        id=Category.OTHER_ITEMS_ID,
        defaults={
            "name": Category.OTHER_ITEMS_NAME,
            "slug": Category.OTHER_ITEMS_SLUG,
            "show_on_homepage": True,
        },
    )
    if created:
        logger.info("Other Items category created")
    return category


def ordered_categories(items) -> list[Category]:
    items = list(items)
    used: set[str] = set()
    ordered: list[Category] = []

    for base_name, base_slug in BASE_CATEGORY_ORDER:
        for item in items:
            if to_slug(item.slug) == base_slug or to_slug(item.name) == to_slug(base_name):
                key = to_slug(item.slug)
                if key not in used:
                    ordered.append(item)
                    used.add(key)
                break

    remaining = sorted(
        (item for item in items if to_slug(item.slug) not in used),
        key=lambda item: item.name.lower(),
    )
    combined = ordered + remaining
    return [c for c in combined if not _is_other_items(c)] + [
        c for c in combined if _is_other_items(c)
    ]


def list_categories() -> list[Category]:
    ensure_other_items()
    return ordered_categories(Category.objects.all())


@transaction.atomic
def create_category(data: dict) -> Category:
    name = (data.get("name") or "").strip()
    if not name:
        raise CategoryValidationError("name is required")

    category = Category.objects.create(
        name=name,
        slug=to_slug(data.get("slug") or name),
        image_url=data.get("image_url") or "",
        hero_image_url=data.get("hero_image_url") or "",
        show_on_homepage=bool(data.get("show_on_homepage")),
    )
    logger.info(
        "Category created", extra={"category_id": category.id, "slug": category.slug}
    )
    return category


@transaction.atomic
def update_category(category_id: str, changes: dict) -> Category:
    if not changes:
        raise CategoryValidationError("No fields to update")

    category = Category.objects.select_for_update().filter(id=category_id).first()
    if category is None:
        raise CategoryNotFoundError()

    if "name" in changes:
        name = (changes["name"] or "").strip()
        if not name:
            raise CategoryValidationError("name cannot be empty")
        category.name = name
    if changes.get("slug") or "name" in changes:
        category.slug = to_slug(changes.get("slug") or category.name)
    if "image_url" in changes:
        category.image_url = changes["image_url"] or ""
    if "hero_image_url" in changes:
        category.hero_image_url = changes["hero_image_url"] or ""
    if "show_on_homepage" in changes:
        category.show_on_homepage = bool(changes["show_on_homepage"])

    category.save()
    logger.info("Category updated", extra={"category_id": category.id, "fields": sorted(changes)})
    return category


@transaction.atomic
def delete_category(category_id: str) -> int:
    """
    Delete a category and move its products to Other Items.
    Returns how many products were reassigned.
    """
    category = Category.objects.select_for_update().filter(id=category_id).first()
    if category is None:
        raise CategoryNotFoundError()
    if _is_other_items(category):
        raise CategoryValidationError("Cannot delete Other Items category")

    ensure_other_items()

    target = to_slug(category.slug or category.name)
    product_ids = [
        pk
        for pk, value in Product.objects.exclude(category="").values_list("id", "category")
        if to_slug(value) == target
    ]
    moved = Product.objects.filter(id__in=product_ids).update(
        category=Category.OTHER_ITEMS_SLUG
    )

    category.delete()
    logger.info(
        "Category deleted",
        extra={"category_id": category_id, "products_moved": moved},
    )
    return moved
