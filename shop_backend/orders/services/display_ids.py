# orders/services/display_ids.py

"""
PAID ORDER DISPLAY IDS ("YY-NNN")

Minted by the webhook when an order is recorded. Orders that predate the
column are numbered by `backfill_order_display_ids`, which draws from the
same locked counter rows so it cannot collide with live recording.
"""

from __future__ import annotations

import logging
from datetime import datetime

from django.db import transaction

from backend.counters import allocate_sequence, two_digit_year
from orders.models import Order, OrderCounter

logger = logging.getLogger(__name__)


def format_order_display_id(year2: int, sequence: int) -> str:
    return f"{int(year2) % 100:02d}-{int(sequence):03d}"


def next_order_display_id(*, now: datetime | None = None) -> str:
    year2 = two_digit_year(now)
    return format_order_display_id(year2, allocate_sequence(OrderCounter, year2))


@transaction.atomic
def backfill_order_display_ids() -> list[tuple[str, str]]:
    missing = (
        Order.objects.select_for_update()
        .filter(display_order_id__isnull=True)
        .order_by("created_at", "id")
    )

    assigned: list[tuple[str, str]] = []
    for order in missing:
        display_id = next_order_display_id(now=order.created_at)
        order.display_order_id = display_id
        order.save(update_fields=["display_order_id"])
        assigned.append((str(order.id), display_id))

    if assigned:
        logger.info("Backfilled order display ids", extra={"count": len(assigned)})
    return assigned
