# orders/models/order.py

import uuid

from django.db import models


class Order(models.Model):
    """
    A paid storefront checkout.

    Key rule:
    - Orders are written by the payment webhook only, after the provider
      reports the hosted session complete. The admin API reads them.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    display_order_id = models.CharField(
        max_length=32, unique=True, null=True, blank=True
    )

    stripe_session_id = models.CharField(max_length=255, unique=True)
    stripe_payment_intent_id = models.CharField(max_length=255, blank=True, default="")

    total_cents = models.IntegerField(default=0)
    shipping_cents = models.IntegerField(default=0)

    customer_email = models.EmailField(blank=True, default="")
    shipping_name = models.CharField(max_length=255, blank=True, default="")
    shipping_address = models.JSONField(null=True, blank=True)

    card_last4 = models.CharField(max_length=4, blank=True, default="")
    card_brand = models.CharField(max_length=32, blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"Order {self.display_order_id or self.id} | {self.total_cents}c"
