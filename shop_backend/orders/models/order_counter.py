# orders/models/order_counter.py

from django.db import models


class OrderCounter(models.Model):
    """
    Last issued paid-order number per 2-digit year (display id "YY-NNN").
    """

    year = models.PositiveSmallIntegerField(primary_key=True)
    counter = models.PositiveIntegerField(default=0)

    def __str__(self):
        return f"{self.year:02d}: {self.counter}"
