# orders/tests/test_orders.py

from datetime import datetime, timezone as dt_timezone

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from django.utils import timezone
from rest_framework.test import APIClient

from orders.models import Order, OrderCounter, OrderItem
from orders.services.cart_metadata import (
    CartLine,
    CartMetadataError,
    decode_cart,
    encode_cart,
)
from orders.services.display_ids import (
    backfill_order_display_ids,
    format_order_display_id,
)
from orders.services.order_recording import record_paid_checkout
from products.models import Product

User = get_user_model()


class CartMetadataTests(TestCase):
    def test_decode_reads_encoded_lines(self):
        raw = encode_cart([CartLine("abc", 2, 1500), CartLine("def", 1, 900)])
        self.assertEqual(raw, "abc:2:1500,def:1:900")
        self.assertEqual(decode_cart(raw)[1], CartLine("def", 1, 900))

    def test_empty_metadata_decodes_to_no_lines(self):
        self.assertEqual(decode_cart(None), [])
        self.assertEqual(decode_cart(""), [])

    def test_malformed_line_raises(self):
        with self.assertRaises(CartMetadataError):
            decode_cart("abc:two:100")

    def test_oversized_cart_rejected(self):
        lines = [CartLine("x" * 32, 1, 100) for _ in range(20)]
        with self.assertRaises(CartMetadataError):
            encode_cart(lines)


class RecordPaidCheckoutTests(TestCase):
    """
    GUARANTEES:
    - One order per provider session, retries return the same order
    - Stock decremented, one-offs marked sold
    """

    def setUp(self):
        self.mug = Product.objects.create(
            name="Crab Mug", price_cents=2400, quantity_available=5
        )
        self.bowl = Product.objects.create(
            name="Shell Bowl", price_cents=4200, is_one_off=True
        )

    def _session(self, **overrides):
        data = {
            "id": "cs_test_123",
            "payment_intent": "pi_123",
            "amount_total": 5500 + 4200 + 500,
            "metadata": {
                "kind": "cart",
                "items": f"{self.mug.id}:2:2400,{self.bowl.id}:1:4200",
            },
            "customer_details": {"email": "buyer@example.com", "name": "Pat Buyer"},
            "shipping_details": {
                "name": "Pat Buyer",
                "address": {"line1": "1 Bay St", "city": "Annapolis", "country": "US"},
            },
            "total_details": {"amount_shipping": 500},
        }
        data.update(overrides)
        return data

    def test_records_order_and_updates_stock(self):
        order = record_paid_checkout(session=self._session())

        self.assertEqual(order.customer_email, "buyer@example.com")
        self.assertEqual(order.shipping_cents, 500)
        self.assertEqual(order.items.count(), 2)

        self.mug.refresh_from_db()
        self.bowl.refresh_from_db()
        self.assertEqual(self.mug.quantity_available, 3)
        self.assertFalse(self.mug.is_sold)
        self.assertTrue(self.bowl.is_sold)

    def test_replayed_session_is_idempotent(self):
        first = record_paid_checkout(session=self._session())
        second = record_paid_checkout(session=self._session())

        self.assertEqual(first.pk, second.pk)
        self.assertEqual(Order.objects.count(), 1)
        self.mug.refresh_from_db()
        self.assertEqual(self.mug.quantity_available, 3)

    def test_expanded_charge_populates_card_fields(self):
        session = self._session(
            payment_intent={
                "id": "pi_456",
                "latest_charge": {
                    "payment_method_details": {
                        "card": {"last4": "4242", "brand": "visa"}
                    }
                },
            }
        )
        order = record_paid_checkout(session=session)

        self.assertEqual(order.stripe_payment_intent_id, "pi_456")
        self.assertEqual(order.card_last4, "4242")
        self.assertEqual(order.card_brand, "visa")

    def test_unknown_product_keeps_line_without_product(self):
        session = self._session(metadata={"items": "missing:1:700"})
        order = record_paid_checkout(session=session)

        item = order.items.get()
        self.assertIsNone(item.product_id)
        self.assertEqual(item.price_cents, 700)


class AdminOrderListViewTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(
            username="owner", password="pass12345", is_staff=True
        )
        self.product = Product.objects.create(name="Heron Print", price_cents=3000)

    def test_requires_admin(self):
        res = self.client.get(reverse("admin-orders"))
        self.assertIn(res.status_code, (401, 403))

    def test_lists_orders_with_product_names(self):
        order = Order.objects.create(
            stripe_session_id="cs_1", total_cents=3500, customer_email="a@b.co"
        )
        OrderItem.objects.create(
            order=order, product=self.product, quantity=1, price_cents=3000
        )

        self.client.force_authenticate(self.admin)
        res = self.client.get(reverse("admin-orders"))

        self.assertEqual(res.status_code, 200)
        self.assertIn("no-store", res["Cache-Control"])
        row = res.json()["orders"][0]
        self.assertEqual(row["totalCents"], 3500)
        self.assertEqual(row["items"][0]["productName"], "Heron Print")

    def test_limits_to_twenty_most_recent(self):
        for i in range(25):
            Order.objects.create(stripe_session_id=f"cs_{i}", total_cents=i)

        self.client.force_authenticate(self.admin)
        res = self.client.get(reverse("admin-orders"))

        self.assertEqual(len(res.json()["orders"]), 20)


class OrderDisplayIdTests(TestCase):
    def test_recorded_orders_are_numbered_per_year(self):
        yy = timezone.now().year % 100
        first = record_paid_checkout(session={"id": "cs_a", "metadata": {}})
        second = record_paid_checkout(session={"id": "cs_b", "metadata": {}})

        self.assertEqual(first.display_order_id, f"{yy:02d}-001")
        self.assertEqual(second.display_order_id, f"{yy:02d}-002")

    def test_backfill_numbers_legacy_orders_by_creation_time(self):
        older = Order.objects.create(stripe_session_id="cs_old")
        newer = Order.objects.create(stripe_session_id="cs_new")
        Order.objects.filter(pk=older.pk).update(
            created_at=datetime(2024, 3, 1, tzinfo=dt_timezone.utc)
        )
        Order.objects.filter(pk=newer.pk).update(
            created_at=datetime(2024, 5, 1, tzinfo=dt_timezone.utc)
        )

        assigned = dict(backfill_order_display_ids())

        self.assertEqual(assigned[str(older.pk)], "24-001")
        self.assertEqual(assigned[str(newer.pk)], "24-002")
        self.assertEqual(OrderCounter.objects.get(year=24).counter, 2)

    def test_format_widens_past_999(self):
        self.assertEqual(format_order_display_id(26, 1000), "26-1000")
