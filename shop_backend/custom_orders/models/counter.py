# custom_orders/models/counter.py

from django.db import models


class DisplayIdCounter(models.Model):
    """
    Last issued custom-order sequence number per 2-digit year.

    Invariant: for a year, issued numbers are exactly 1..counter with no
    two CustomOrders sharing one. Only backend.counters writes this row.
    """

    year = models.PositiveSmallIntegerField(primary_key=True)
    counter = models.PositiveIntegerField(default=0)

    def __str__(self):
        return f"{self.year:02d}: {self.counter}"
