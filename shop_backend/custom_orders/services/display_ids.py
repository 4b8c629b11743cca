# custom_orders/services/display_ids.py

"""
CUSTOM ORDER DISPLAY IDS ("CO-YY-NNN")

GUARANTEES:
- Per 2-digit year, issued numbers are 1..N with no gaps and no duplicates
- The id is minted in the same transaction as the order insert; a failed
  insert rolls the counter back
- Backfill draws from the same locked counter rows as live creation, so
  the two are serialized and cannot hand out the same number
- No retries: failures propagate to the caller
"""

from __future__ import annotations

import logging
from datetime import datetime

from django.db import transaction

from backend.counters import allocate_sequence, two_digit_year
from custom_orders.models import CustomOrder, DisplayIdCounter

logger = logging.getLogger(__name__)

DISPLAY_PREFIX = "CO"


def format_display_id(year2: int, sequence: int) -> str:
    # 3-digit pad; 1000+ simply widens
    return f"{DISPLAY_PREFIX}-{int(year2) % 100:02d}-{int(sequence):03d}"


def next_display_id(*, now: datetime | None = None) -> str:
    year2 = two_digit_year(now)
    return format_display_id(year2, allocate_sequence(DisplayIdCounter, year2))


@transaction.atomic
def create_custom_order(**fields) -> CustomOrder:
    display_id = next_display_id()
    order = CustomOrder.objects.create(display_custom_order_id=display_id, **fields)
    logger.info(
        "Custom order created",
        extra={"custom_order_id": str(order.id), "display_id": display_id},
    )
    return order


@transaction.atomic
def backfill_display_ids() -> list[tuple[str, str]]:
    """
    Number every custom order lacking a display id, oldest first, using the
    order's own creation year. All-or-nothing.
    """
    missing = (
        CustomOrder.objects.select_for_update()
        .filter(display_custom_order_id__isnull=True)
        .order_by("created_at", "id")
    )

    assigned: list[tuple[str, str]] = []
    for order in missing:
        display_id = next_display_id(now=order.created_at)
        order.display_custom_order_id = display_id
        order.save(update_fields=["display_custom_order_id"])
        assigned.append((str(order.id), display_id))

    if assigned:
        logger.info("Backfilled custom order display ids", extra={"count": len(assigned)})
    return assigned
