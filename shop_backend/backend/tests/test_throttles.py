# backend/tests/test_throttles.py

from unittest.mock import patch

from django.core.cache import cache
from django.test import TestCase
from rest_framework.test import APIClient

from backend.throttles import PublicCatalogThrottle, PublicWriteThrottle, WebhookThrottle
from categories.views import PublicCategoryListView
from inbox.views.contact import ContactMessageCreateView
from products.views.product import PublicProductDetailView, PublicProductListView
from public.views.checkout import CheckoutSessionCreateView, CheckoutSessionDetailView
from public.views.stripe_webhook import StripeWebhookView
from site_content.views import PublicGalleryView, PublicSiteContentView


class ThrottleScopeTests(TestCase):
    def test_public_views_share_scoped_throttles(self):
        cases = {
            PublicProductListView: PublicCatalogThrottle,
            PublicProductDetailView: PublicCatalogThrottle,
            PublicSiteContentView: PublicCatalogThrottle,
            PublicGalleryView: PublicCatalogThrottle,
            PublicCategoryListView: PublicCatalogThrottle,
            CheckoutSessionDetailView: PublicCatalogThrottle,
            ContactMessageCreateView: PublicWriteThrottle,
            CheckoutSessionCreateView: PublicWriteThrottle,
            StripeWebhookView: WebhookThrottle,
        }
        for view, throttle in cases.items():
            with self.subTest(view=view.__name__):
                self.assertEqual(list(view.throttle_classes), [throttle])

    def test_scopes_have_configured_rates(self):
        for throttle in (PublicCatalogThrottle, PublicWriteThrottle, WebhookThrottle):
            with self.subTest(scope=throttle.scope):
                self.assertIn(throttle.scope, throttle.THROTTLE_RATES)


class CatalogThrottleTests(TestCase):
    def setUp(self):
        cache.clear()
        self.addCleanup(cache.clear)
        self.client = APIClient()

    def test_catalog_reads_count_against_one_bucket(self):
        with patch.object(PublicCatalogThrottle, "THROTTLE_RATES", {"public_catalog": "2/min"}):
            first = self.client.get("/api/products/")
            second = self.client.get("/api/site-content/")
            third = self.client.get("/api/products/")

        self.assertEqual(first.status_code, 200)
        self.assertEqual(second.status_code, 200)
        self.assertEqual(third.status_code, 429)
