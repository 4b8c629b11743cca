# custom_orders/models/custom_order.py

import uuid

from django.db import models
from django.utils import timezone

from inbox.models import Message


class CustomOrder(models.Model):
    """
    Admin-created commission for a one-off piece.

    LIFECYCLE:
    - pending: created manually or from an inbox Message
    - payment link attached (hosted checkout session)
    - paid: webhook or admin flips status; paid_at stamped once

    Custom orders are never deleted.
    """

    STATUS_PENDING = "pending"
    STATUS_PAID = "paid"

    STATUS_CHOICES = (
        (STATUS_PENDING, "Pending"),
        (STATUS_PAID, "Paid"),
    )

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    display_custom_order_id = models.CharField(
        max_length=32, unique=True, null=True, blank=True
    )

    customer_name = models.CharField(max_length=255)
    customer_email = models.EmailField()
    description = models.TextField()
    image_url = models.URLField(max_length=2000, null=True, blank=True)

    # minor units (USD cents)
    amount = models.PositiveIntegerField(null=True, blank=True)

    message = models.ForeignKey(
        Message,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="custom_orders",
    )

    status = models.CharField(
        max_length=16, choices=STATUS_CHOICES, default=STATUS_PENDING, db_index=True
    )
    payment_link = models.URLField(max_length=2000, null=True, blank=True)
    stripe_session_id = models.CharField(max_length=255, blank=True, default="")
    stripe_payment_intent_id = models.CharField(max_length=255, blank=True, default="")
    paid_at = models.DateTimeField(null=True, blank=True)

    shipping_name = models.CharField(max_length=255, blank=True, default="")
    shipping_line1 = models.CharField(max_length=255, blank=True, default="")
    shipping_line2 = models.CharField(max_length=255, blank=True, default="")
    shipping_city = models.CharField(max_length=120, blank=True, default="")
    shipping_state = models.CharField(max_length=120, blank=True, default="")
    shipping_postal_code = models.CharField(max_length=32, blank=True, default="")
    shipping_country = models.CharField(max_length=2, blank=True, default="")
    shipping_phone = models.CharField(max_length=40, blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.display_custom_order_id or self.id} | {self.customer_name}"

    @staticmethod
    def normalize_status(value) -> str:
        return CustomOrder.STATUS_PAID if value == CustomOrder.STATUS_PAID else CustomOrder.STATUS_PENDING

    @property
    def label(self) -> str:
        return self.display_custom_order_id or str(self.id)

    def mark_paid(self, *, when=None) -> list[str]:
        """
        Flip to paid. Returns the fields touched (for update_fields).
        """
        touched = []
        if self.status != self.STATUS_PAID:
            self.status = self.STATUS_PAID
            touched.append("status")
        if self.paid_at is None:
            self.paid_at = when or timezone.now()
            touched.append("paid_at")
        return touched

    @property
    def shipping_address(self) -> dict | None:
        parts = {
            "line1": self.shipping_line1,
            "line2": self.shipping_line2,
            "city": self.shipping_city,
            "state": self.shipping_state,
            "postal_code": self.shipping_postal_code,
            "country": self.shipping_country,
            "phone": self.shipping_phone,
        }
        if not any(parts.values()):
            return None
        address = {key: (value or None) for key, value in parts.items()}
        address["name"] = self.shipping_name or None
        return address
