# orders/models/order_item.py

from django.db import models

from orders.models.order import Order
from products.models import Product


class OrderItem(models.Model):
    """
    Line item snapshot: price is copied at purchase time.
    Product may later be deleted from the catalog; the line survives.
    """

    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    product = models.ForeignKey(
        Product,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="order_items",
    )

    quantity = models.PositiveIntegerField(default=1)
    price_cents = models.IntegerField(default=0)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return f"{self.quantity} x {self.product_id} @ {self.price_cents}c"
