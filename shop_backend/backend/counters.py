"""
PATH: backend/counters.py

PER-YEAR SEQUENCE COUNTERS

Human-facing ids (custom orders "CO-YY-NNN", paid orders "YY-NNN") are minted
from a row per 2-digit year holding the last issued number.

CONCURRENCY CONTRACT:
- The counter row is read, advanced and written while locked
  (SELECT ... FOR UPDATE on Postgres; BEGIN IMMEDIATE on SQLite)
- Must be called inside the same transaction that stores the minted id,
  so a rollback returns the number to the pool (no gaps)
- Errors propagate; nothing here retries
"""

from __future__ import annotations

from datetime import datetime, timezone as dt_timezone

from django.db import transaction
from django.utils import timezone


def two_digit_year(moment: datetime | None = None) -> int:
    """
    Two-digit UTC year of `moment`, independent of TIME_ZONE.
    Naive datetimes are taken as UTC.
    """
    moment = moment or timezone.now()
    if timezone.is_aware(moment):
        moment = moment.astimezone(dt_timezone.utc)
    return moment.year % 100


def allocate_sequence(counter_model, year2: int, *, count: int = 1) -> int:
    """
    Reserve `count` consecutive numbers for `year2` and return the first.

    `counter_model` must have `year` (pk) and `counter` fields.
    """
    if count < 1:
        raise ValueError("count must be >= 1")

    with transaction.atomic():
        row, _ = counter_model.objects.select_for_update().get_or_create(
            year=year2,
            defaults={"counter": 0},
        )
        first = int(row.counter) + 1
        row.counter = int(row.counter) + count
        row.save(update_fields=["counter"])

    return first
