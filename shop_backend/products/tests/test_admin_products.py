# products/tests/test_admin_products.py

from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from django.urls import reverse
from rest_framework.test import APIClient

from orders.models import Order, OrderItem
from products.models import Product
from public.services.exceptions import PaymentProviderError

User = get_user_model()

STRIPE_OK = {"STRIPE": {"SECRET_KEY": "sk_test_x", "WEBHOOK_SECRET": "whsec_x", "API_VERSION": ""}}
STRIPE_OFF = {"STRIPE": {"SECRET_KEY": "", "WEBHOOK_SECRET": "", "API_VERSION": ""}}


def _body(**overrides):
    data = {
        "name": "Blue Crab Ornament",
        "description": "Hand-painted oyster shell",
        "priceCents": 2400,
        "category": "Ornaments",
        "imageUrl": "https://img.example.com/crab.jpg",
    }
    data.update(overrides)
    return data


class AdminProductCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(
            username="owner", password="pass12345", is_staff=True
        )
        self.client.force_authenticate(self.admin)
        self.list_url = reverse("admin-product-list")

    def _detail(self, product_id):
        return reverse("admin-product-detail", args=[product_id])


@override_settings(PAYMENTS=STRIPE_OFF)
class AdminProductCreateTests(AdminProductCase):
    def test_requires_staff(self):
        res = APIClient().post(self.list_url, _body(), format="json")
        self.assertIn(res.status_code, (401, 403))

    def test_list_includes_inactive_products(self):
        Product.objects.create(name="Draft", price_cents=100, is_active=False)

        res = self.client.get(self.list_url)

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["products"][0]["isActive"], False)

    def test_create_defaults_to_one_off_and_reports_missing_stripe(self):
        res = self.client.post(self.list_url, _body(), format="json")

        self.assertEqual(res.status_code, 201)
        body = res.json()
        self.assertEqual(body["error"], "Stripe is not configured")
        product = Product.objects.get(id=body["product"]["id"])
        self.assertEqual(product.slug, "blue-crab-ornament")
        self.assertTrue(product.is_one_off)
        self.assertEqual(product.quantity_available, 1)
        self.assertTrue(product.is_active)

    def test_stocked_product_keeps_at_least_one(self):
        res = self.client.post(
            self.list_url, _body(isOneOff=False, quantityAvailable=0), format="json"
        )

        self.assertEqual(res.status_code, 201)
        self.assertEqual(res.json()["product"]["quantityAvailable"], 1)

    def test_missing_required_fields_is_400(self):
        res = self.client.post(self.list_url, _body(description="  "), format="json")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["error"], "name, description, and priceCents are required")

    def test_negative_price_is_400(self):
        res = self.client.post(self.list_url, _body(priceCents=-1), format="json")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["error"], "priceCents must be non-negative")

    def test_inline_image_is_413(self):
        res = self.client.post(
            self.list_url, _body(imageUrl="data:image/png;base64,AAAA"), format="json"
        )

        self.assertEqual(res.status_code, 413)
        self.assertFalse(Product.objects.exists())


@override_settings(PAYMENTS=STRIPE_OK)
class AdminProductStripeTests(AdminProductCase):
    @patch("products.services.admin_catalog.create_product_with_price")
    def test_create_attaches_stripe_ids(self, mock_create):
        mock_create.return_value = ("prod_123", "price_123")

        res = self.client.post(self.list_url, _body(), format="json")

        self.assertEqual(res.status_code, 201)
        self.assertNotIn("error", res.json())
        self.assertEqual(res.json()["product"]["stripeProductId"], "prod_123")
        self.assertEqual(res.json()["product"]["stripePriceId"], "price_123")
        kwargs = mock_create.call_args.kwargs
        self.assertEqual(kwargs["unit_amount"], 2400)
        self.assertEqual(kwargs["currency"], "usd")

    @patch("products.services.admin_catalog.create_product_with_price")
    def test_stripe_failure_keeps_product(self, mock_create):
        mock_create.side_effect = PaymentProviderError(
            "Failed to create Stripe product and price.", detail="card_declined"
        )

        res = self.client.post(self.list_url, _body(), format="json")

        self.assertEqual(res.status_code, 201)
        self.assertEqual(res.json()["error"], "Failed to create Stripe product and price.")
        self.assertEqual(Product.objects.count(), 1)
        self.assertEqual(Product.objects.get().stripe_product_id, "")


class AdminProductUpdateDeleteTests(AdminProductCase):
    def setUp(self):
        super().setUp()
        self.product = Product.objects.create(
            name="Oyster Dish", slug="oyster-dish", price_cents=1800, category="Decor"
        )

    def test_rename_updates_slug(self):
        res = self.client.put(
            self._detail(self.product.id), {"name": "Gilded Oyster Dish"}, format="json"
        )

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["product"]["slug"], "gilded-oyster-dish")

    def test_empty_category_is_400(self):
        res = self.client.put(self._detail(self.product.id), {"category": " "}, format="json")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["error"], "category cannot be empty")

    def test_no_fields_is_400(self):
        res = self.client.put(self._detail(self.product.id), {}, format="json")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["error"], "No fields to update")

    def test_inline_gallery_image_is_413(self):
        res = self.client.put(
            self._detail(self.product.id),
            {"imageUrls": ["https://img.example.com/a.jpg", "data:image/jpeg;base64,AA"]},
            format="json",
        )
        self.assertEqual(res.status_code, 413)

    def test_missing_product_is_404(self):
        res = self.client.put(self._detail("missing"), {"name": "X"}, format="json")
        self.assertEqual(res.status_code, 404)

    def test_delete_keeps_order_history(self):
        order = Order.objects.create(stripe_session_id="cs_test_1", total_cents=1800)
        item = OrderItem.objects.create(order=order, product=self.product, price_cents=1800)

        res = self.client.delete(self._detail(self.product.id))

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), {"success": True})
        self.assertFalse(Product.objects.filter(id=self.product.id).exists())
        item.refresh_from_db()
        self.assertIsNone(item.product_id)

    def test_delete_missing_product_is_404(self):
        res = self.client.delete(self._detail("missing"))
        self.assertEqual(res.status_code, 404)
