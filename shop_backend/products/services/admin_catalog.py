# products/services/admin_catalog.py

"""
ADMIN CATALOG

create_product(fields) -> (product, stripe_error)
update_product(product_id, changes) -> product
delete_product(product_id)

Rules:
- one-off pieces are stocked at exactly 1; others at max(1, quantity)
- the slug follows the name
- a new product gets a Stripe product + price when Stripe is configured;
  Stripe trouble never undoes the catalog row (the error is returned instead)
- image fields take URLs only; inline image bytes are a 413
"""

from __future__ import annotations

import logging

from django.db import transaction

from backend.config import MissingConfigurationError
from categories.services.catalog import to_slug
from products.models import Product
from products.services.exceptions import (
    InlineImageError,
    ProductNotFoundError,
    ProductValidationError,
)
from public.services.exceptions import PaymentProviderError
from public.services.stripe_gateway import create_product_with_price

logger = logging.getLogger(__name__)

CURRENCY = "usd"

UPDATABLE_FIELDS = (
    "name",
    "description",
    "price_cents",
    "category",
    "collection",
    "image_url",
    "image_urls",
    "quantity_available",
    "is_one_off",
    "is_active",
    "stripe_price_id",
    "stripe_product_id",
)


def _is_inline_image(value) -> bool:
    return isinstance(value, str) and value.strip().lower().startswith("data:image/")


def reject_inline_images(fields: dict) -> None:
    urls = [fields.get("image_url"), *(fields.get("image_urls") or [])]
    if any(_is_inline_image(url) for url in urls):
        raise InlineImageError()


def _stock(is_one_off: bool, quantity) -> int:
    if is_one_off:
        return 1
    return max(1, int(quantity or 1))


def _attach_stripe_ids(product: Product) -> str | None:
    if product.stripe_product_id and product.stripe_price_id:
        return None
    try:
        product_id, price_id = create_product_with_price(
            name=product.name,
            description=product.description,
            unit_amount=product.price_cents,
            currency=CURRENCY,
            metadata={"product_id": product.id, "product_slug": product.slug},
        )
    except MissingConfigurationError:
        return "Stripe is not configured"
    except PaymentProviderError as exc:
        logger.warning(
            "Product saved without Stripe ids", extra={"product_id": product.id, "error": exc.detail}
        )
        return exc.error

    product.stripe_product_id = product_id
    product.stripe_price_id = price_id
    product.save(update_fields=["stripe_product_id", "stripe_price_id"])
    return None


def create_product(fields: dict) -> tuple[Product, str | None]:
    reject_inline_images(fields)

    is_one_off = fields.get("is_one_off")
    is_one_off = True if is_one_off is None else bool(is_one_off)

    with transaction.atomic():
        product = Product.objects.create(
            name=fields["name"],
            slug=to_slug(fields["name"]),
            description=fields["description"],
            price_cents=fields["price_cents"],
            category=fields["category"],
            collection=fields.get("collection") or "",
            image_url=fields["image_url"],
            image_urls=list(fields.get("image_urls") or []),
            is_active=True if fields.get("is_active") is None else bool(fields["is_active"]),
            is_one_off=is_one_off,
            quantity_available=_stock(is_one_off, fields.get("quantity_available")),
            stripe_product_id=fields.get("stripe_product_id") or "",
            stripe_price_id=fields.get("stripe_price_id") or "",
        )
    logger.info("Product created", extra={"product_id": product.id, "slug": product.slug})

    # outside the row's transaction: a provider failure keeps the product
    return product, _attach_stripe_ids(product)


@transaction.atomic
def update_product(product_id: str, changes: dict) -> Product:
    reject_inline_images(changes)
    if not changes:
        raise ProductValidationError("No fields to update")
    if "category" in changes and not (changes["category"] or "").strip():
        raise ProductValidationError("category cannot be empty")

    product = Product.objects.select_for_update().filter(id=product_id).first()
    if product is None:
        raise ProductNotFoundError()

    for name, value in changes.items():
        if name not in UPDATABLE_FIELDS:
            continue
        if isinstance(value, str):
            value = value.strip()
        if name in ("collection", "stripe_price_id", "stripe_product_id", "image_url"):
            value = value or ""
        setattr(product, name, value)
    if changes.get("name"):
        product.slug = to_slug(product.name)

    product.save()
    logger.info("Product updated", extra={"product_id": product.id, "fields": sorted(changes)})
    return product


def delete_product(product_id: str) -> None:
    deleted, _ = Product.objects.filter(id=product_id).delete()
    if not deleted:
        raise ProductNotFoundError()
    logger.info("Product deleted", extra={"product_id": product_id})
