# custom_orders/tests/test_display_ids.py

from datetime import datetime, timezone as dt_timezone
from io import StringIO

from django.core.management import call_command
from django.db import IntegrityError, transaction
from django.test import TestCase, override_settings
from django.utils import timezone

from backend.counters import two_digit_year
from custom_orders.models import CustomOrder, DisplayIdCounter
from custom_orders.services.display_ids import (
    backfill_display_ids,
    create_custom_order,
    format_display_id,
    next_display_id,
)


def _fields(**overrides):
    data = {
        "customer_name": "Jordan",
        "customer_email": "jordan@example.com",
        "description": "Hand-painted crab ornament",
    }
    data.update(overrides)
    return data


def _legacy_order(created_at: datetime, **overrides) -> CustomOrder:
    order = CustomOrder.objects.create(**_fields(**overrides))
    CustomOrder.objects.filter(pk=order.pk).update(created_at=created_at)
    order.refresh_from_db()
    return order


class FormatDisplayIdTests(TestCase):
    def test_zero_pads_to_three_digits(self):
        self.assertEqual(format_display_id(26, 7), "CO-26-007")
        self.assertEqual(format_display_id(5, 42), "CO-05-042")

    def test_widens_past_999(self):
        self.assertEqual(format_display_id(26, 1000), "CO-26-1000")


class NextDisplayIdTests(TestCase):
    """
    GUARANTEES:
    - N creations in a year yield sequence 1..N, no gaps, no duplicates
    - A failed insert leaves the counter untouched
    """

    def setUp(self):
        self.yy = timezone.now().year % 100

    def test_sequential_creations_are_contiguous(self):
        orders = [create_custom_order(**_fields()) for _ in range(12)]

        ids = [o.display_custom_order_id for o in orders]
        expected = [format_display_id(self.yy, n) for n in range(1, 13)]
        self.assertEqual(ids, expected)
        self.assertEqual(DisplayIdCounter.objects.get(year=self.yy).counter, 12)

    def test_failed_insert_rolls_back_counter(self):
        create_custom_order(**_fields())

        with self.assertRaises(IntegrityError):
            create_custom_order(**_fields(customer_name=None))

        self.assertEqual(DisplayIdCounter.objects.get(year=self.yy).counter, 1)
        self.assertEqual(
            create_custom_order(**_fields()).display_custom_order_id,
            format_display_id(self.yy, 2),
        )

    def test_outer_rollback_returns_number(self):
        with self.assertRaises(RuntimeError):
            with transaction.atomic():
                create_custom_order(**_fields())
                raise RuntimeError("boom")

        self.assertFalse(DisplayIdCounter.objects.filter(year=self.yy).exists())
        self.assertEqual(
            create_custom_order(**_fields()).display_custom_order_id,
            format_display_id(self.yy, 1),
        )

    def test_interleaved_failures_leave_no_gaps(self):
        created = []
        for i in range(20):
            if i % 3 == 0:
                with self.assertRaises(IntegrityError):
                    create_custom_order(**_fields(description=None))
                continue
            created.append(create_custom_order(**_fields()).display_custom_order_id)

        self.assertEqual(len(set(created)), len(created))
        self.assertEqual(
            created, [format_display_id(self.yy, n) for n in range(1, len(created) + 1)]
        )

    def test_counter_rolls_over_to_four_digits(self):
        DisplayIdCounter.objects.create(year=self.yy, counter=999)
        self.assertEqual(next_display_id(), format_display_id(self.yy, 1000))

    def test_years_are_counted_independently(self):
        a = next_display_id(now=datetime(2025, 6, 1, tzinfo=dt_timezone.utc))
        b = next_display_id(now=datetime(2026, 1, 2, tzinfo=dt_timezone.utc))
        c = next_display_id(now=datetime(2025, 12, 1, tzinfo=dt_timezone.utc))

        self.assertEqual((a, b, c), ("CO-25-001", "CO-26-001", "CO-25-002"))


class BackfillDisplayIdsTests(TestCase):
    def test_assigns_in_creation_order_per_year(self):
        late_24 = _legacy_order(datetime(2024, 11, 5, tzinfo=dt_timezone.utc))
        early_25 = _legacy_order(datetime(2025, 1, 3, tzinfo=dt_timezone.utc))
        early_24 = _legacy_order(datetime(2024, 2, 1, tzinfo=dt_timezone.utc))
        mid_24 = _legacy_order(datetime(2024, 6, 9, tzinfo=dt_timezone.utc))

        assigned = dict(backfill_display_ids())

        self.assertEqual(assigned[str(early_24.pk)], "CO-24-001")
        self.assertEqual(assigned[str(mid_24.pk)], "CO-24-002")
        self.assertEqual(assigned[str(late_24.pk)], "CO-24-003")
        self.assertEqual(assigned[str(early_25.pk)], "CO-25-001")
        self.assertEqual(DisplayIdCounter.objects.get(year=24).counter, 3)
        self.assertEqual(DisplayIdCounter.objects.get(year=25).counter, 1)

    def test_continues_from_live_counter(self):
        DisplayIdCounter.objects.create(year=24, counter=4)
        legacy = _legacy_order(datetime(2024, 3, 1, tzinfo=dt_timezone.utc))

        backfill_display_ids()

        legacy.refresh_from_db()
        self.assertEqual(legacy.display_custom_order_id, "CO-24-005")

    def test_numbered_orders_are_left_alone(self):
        numbered = create_custom_order(**_fields())
        before = numbered.display_custom_order_id

        self.assertEqual(backfill_display_ids(), [])
        numbered.refresh_from_db()
        self.assertEqual(numbered.display_custom_order_id, before)

    def test_command_dry_run_saves_nothing(self):
        legacy = _legacy_order(datetime(2024, 3, 1, tzinfo=dt_timezone.utc))
        out = StringIO()

        call_command("backfill_custom_order_ids", "--dry-run", stdout=out)

        legacy.refresh_from_db()
        self.assertIsNone(legacy.display_custom_order_id)
        self.assertFalse(DisplayIdCounter.objects.filter(year=24).exists())
        self.assertIn("CO-24-001", out.getvalue())

    def test_command_assigns_ids(self):
        legacy = _legacy_order(datetime(2024, 3, 1, tzinfo=dt_timezone.utc))

        call_command("backfill_custom_order_ids", stdout=StringIO())

        legacy.refresh_from_db()
        self.assertEqual(legacy.display_custom_order_id, "CO-24-001")


@override_settings(TIME_ZONE="America/New_York")
class UtcYearBoundaryTests(TestCase):
    """
    GUARANTEES:
    - The YY segment is the UTC year, whatever the site TIME_ZONE
    - Live minting and backfill agree for a row created near New Year
    """

    new_year_utc = datetime(2025, 1, 1, 3, 0, tzinfo=dt_timezone.utc)

    def test_two_digit_year_ignores_local_zone(self):
        # 2024-12-31 22:00 in New York
        self.assertEqual(two_digit_year(self.new_year_utc), 25)

    def test_naive_datetime_is_taken_as_utc(self):
        self.assertEqual(two_digit_year(datetime(2024, 12, 31, 23, 59)), 24)

    def test_backfill_uses_utc_year(self):
        legacy = _legacy_order(self.new_year_utc)

        backfill_display_ids()

        legacy.refresh_from_db()
        self.assertEqual(legacy.display_custom_order_id, "CO-25-001")

    def test_live_minting_uses_utc_year(self):
        self.assertEqual(next_display_id(now=self.new_year_utc), "CO-25-001")
