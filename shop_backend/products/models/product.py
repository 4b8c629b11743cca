# products/models/product.py

import uuid

from django.db import models


def _new_product_id() -> str:
    return uuid.uuid4().hex


class Product(models.Model):
    """
    A sellable handmade item.

    STOCK MODEL:
    - quantity_available NULL means stock is not tracked (made to order)
    - one-off pieces sell exactly once; is_sold flips after payment
    - price_cents is integer minor units (USD cents)
    """

    id = models.CharField(
        primary_key=True, max_length=64, default=_new_product_id, editable=False
    )

    name = models.CharField(max_length=255, db_index=True)
    slug = models.SlugField(max_length=255, blank=True, default="")
    description = models.TextField(blank=True, default="")

    price_cents = models.PositiveIntegerField(null=True, blank=True)

    category = models.CharField(max_length=120, blank=True, default="")
    collection = models.CharField(max_length=120, blank=True, default="")

    image_url = models.URLField(max_length=2000, blank=True, default="")
    image_urls = models.JSONField(default=list, blank=True)

    is_active = models.BooleanField(default=True)
    is_one_off = models.BooleanField(default=False)
    is_sold = models.BooleanField(default=False)
    quantity_available = models.IntegerField(null=True, blank=True)

    stripe_price_id = models.CharField(max_length=128, blank=True, default="")
    stripe_product_id = models.CharField(
        max_length=128, blank=True, default="", db_index=True
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["is_active", "created_at"], name="product_active_created_idx"),
        ]

    def __str__(self):
        return self.name

    @property
    def tracks_stock(self) -> bool:
        return self.quantity_available is not None

    def availability_error(self) -> str | None:
        """
        Reason this product cannot be bought right now, or None.
        """
        if not self.is_active:
            return f"Product {self.name} is inactive"
        if self.is_sold:
            return f"Product {self.name} is already sold"
        if self.price_cents is None:
            return f"Product {self.name} is missing a price"
        if self.tracks_stock and self.quantity_available <= 0:
            return f"Product {self.name} is sold out"
        return None

    def record_sale(self, quantity: int = 1) -> None:
        """
        Decrement stock after a paid checkout. Untracked and one-off items
        are marked sold outright.
        """
        if self.quantity_available is None or self.is_one_off:
            self.quantity_available = 0
            self.is_sold = True
            return

        remaining = max(0, int(self.quantity_available) - int(quantity))
        self.quantity_available = remaining
        if remaining <= 0:
            self.is_sold = True
