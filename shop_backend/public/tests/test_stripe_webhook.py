# public/tests/test_stripe_webhook.py

import hashlib
import hmac
import json
import time
from unittest.mock import patch

from django.test import TestCase, override_settings
from django.urls import reverse
from django.utils import timezone
from rest_framework.test import APIClient

from custom_orders.models import CustomOrder
from custom_orders.services.display_ids import create_custom_order
from orders.models import Order
from orders.services.cart_metadata import CartLine, encode_cart
from products.models import Product

WEBHOOK_SECRET = "whsec_test_secret"
STRIPE_OK = {
    "STRIPE": {"SECRET_KEY": "sk_test_x", "WEBHOOK_SECRET": WEBHOOK_SECRET, "API_VERSION": ""}
}


def _signed(event: dict, secret: str = WEBHOOK_SECRET) -> tuple[bytes, str]:
    body = json.dumps(event).encode("utf-8")
    timestamp = int(time.time())
    signed = f"{timestamp}.".encode("utf-8") + body
    digest = hmac.new(secret.encode("utf-8"), signed, hashlib.sha256).hexdigest()
    return body, f"t={timestamp},v1={digest}"


def _completed(session: dict) -> dict:
    return {
        "id": "evt_1",
        "object": "event",
        "type": "checkout.session.completed",
        "data": {"object": {"object": "checkout.session", "payment_status": "paid", **session}},
    }


@override_settings(PAYMENTS=STRIPE_OK)
class StripeWebhookTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.url = reverse("stripe-webhook")
        self.yy = timezone.now().year % 100

    def _deliver(self, event: dict, *, secret: str = WEBHOOK_SECRET):
        body, header = _signed(event, secret)
        return self.client.post(
            self.url, data=body, content_type="application/json", HTTP_STRIPE_SIGNATURE=header
        )

    def test_bad_signature_is_400(self):
        res = self._deliver(_completed({"id": "cs_x"}), secret="whsec_wrong")

        self.assertEqual(res.status_code, 400)
        self.assertFalse(Order.objects.exists())

    def test_missing_signature_is_400(self):
        res = self.client.post(self.url, data=b"{}", content_type="application/json")
        self.assertEqual(res.status_code, 400)

    @override_settings(PAYMENTS={"STRIPE": {"SECRET_KEY": "", "WEBHOOK_SECRET": "", "API_VERSION": ""}})
    def test_missing_webhook_secret_is_500(self):
        res = self._deliver(_completed({"id": "cs_x"}))

        self.assertEqual(res.status_code, 500)
        self.assertEqual(res.json()["missing"], ["STRIPE_WEBHOOK_SECRET"])

    def test_other_events_are_acknowledged(self):
        res = self._deliver({"id": "evt_2", "type": "payment_intent.created", "data": {"object": {}}})

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["handled"], "ignored")

    def test_custom_order_payment_marks_paid_with_shipping(self):
        order = create_custom_order(
            customer_name="Casey", customer_email="c@x.co", description="Bowl", amount=4500
        )

        res = self._deliver(
            _completed(
                {
                    "id": "cs_co_1",
                    "payment_intent": "pi_123",
                    "metadata": {"kind": "custom_order", "customOrderId": str(order.id)},
                    "customer_details": {"email": "c@x.co", "phone": "+14105550100"},
                    "collected_information": {
                        "shipping_details": {
                            "name": "Casey Shore",
                            "address": {
                                "line1": "12 Bay Rd",
                                "line2": None,
                                "city": "Easton",
                                "state": "MD",
                                "postal_code": "21601",
                                "country": "US",
                            },
                        }
                    },
                }
            )
        )

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["handled"], "custom_order")
        order.refresh_from_db()
        self.assertEqual(order.status, CustomOrder.STATUS_PAID)
        self.assertIsNotNone(order.paid_at)
        self.assertEqual(order.stripe_payment_intent_id, "pi_123")
        self.assertEqual(order.shipping_name, "Casey Shore")
        self.assertEqual(order.shipping_city, "Easton")
        self.assertEqual(order.shipping_phone, "+14105550100")
        self.assertEqual(order.shipping_line2, "")

    @patch("public.services.webhooks.retrieve_card_summary")
    def test_cart_payment_records_order_and_decrements_stock(self, mock_card):
        mock_card.return_value = {"last4": "4242", "brand": "visa"}
        mug = Product.objects.create(name="Crab Mug", price_cents=2400, quantity_available=3)
        bowl = Product.objects.create(
            name="Oyster Bowl", price_cents=6800, is_one_off=True, quantity_available=1
        )
        items = encode_cart([CartLine(mug.id, 2, 2400), CartLine(bowl.id, 1, 6800)])
        event = _completed(
            {
                "id": "cs_cart_1",
                "amount_total": 12100,
                "payment_intent": "pi_cart",
                "metadata": {"kind": "cart", "items": items},
                "customer_details": {"email": "pat@example.com", "name": "Pat"},
                "total_details": {"amount_shipping": 0},
            }
        )

        res = self._deliver(event)

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["handled"], "order")
        mock_card.assert_called_once_with("pi_cart")

        order = Order.objects.get(stripe_session_id="cs_cart_1")
        self.assertEqual(order.display_order_id, f"{self.yy:02d}-001")
        self.assertEqual(order.total_cents, 12100)
        self.assertEqual(order.card_last4, "4242")
        self.assertEqual(order.items.count(), 2)

        mug.refresh_from_db()
        bowl.refresh_from_db()
        self.assertEqual(mug.quantity_available, 1)
        self.assertFalse(mug.is_sold)
        self.assertTrue(bowl.is_sold)

        # retried delivery is a no-op
        self.assertEqual(self._deliver(event).status_code, 200)
        self.assertEqual(Order.objects.count(), 1)
        mug.refresh_from_db()
        self.assertEqual(mug.quantity_available, 1)

    def test_unpaid_completion_is_ignored(self):
        event = _completed({"id": "cs_async", "metadata": {"kind": "cart", "items": ""}})
        event["data"]["object"]["payment_status"] = "unpaid"

        res = self._deliver(event)

        self.assertEqual(res.json()["handled"], "ignored")
        self.assertFalse(Order.objects.exists())
