# categories/tests/test_categories.py

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from categories.models import Category
from categories.services.catalog import ensure_other_items, ordered_categories, to_slug
from products.models import Product

User = get_user_model()


def _category(name: str, slug: str | None = None, **extra) -> Category:
    return Category.objects.create(name=name, slug=slug or to_slug(name), **extra)


class CategoryOrderingTests(TestCase):
    """
    GUARANTEES:
    - Base shelves lead in shop order, the rest follow by name
    - Other Items is always last
    """

    def test_slug_normalization(self):
        self.assertEqual(to_slug("  Wine Stoppers! "), "wine-stoppers")
        self.assertEqual(to_slug("--Sea & Shore--"), "sea-shore")
        self.assertEqual(to_slug(None), "")

    def test_base_order_then_alphabetical_then_other_items(self):
        rows = [
            _category("Other Items", "other-items"),
            _category("Wall Art"),
            _category("Decor"),
            _category("Ring Dishes", "ring-dish"),
            _category("Coasters"),
            _category("Ornaments", "ornament"),
        ]

        names = [c.name for c in ordered_categories(rows)]

        self.assertEqual(
            names,
            ["Ring Dishes", "Ornaments", "Decor", "Coasters", "Wall Art", "Other Items"],
        )

    def test_other_items_is_created_once(self):
        first = ensure_other_items()
        second = ensure_other_items()

        self.assertEqual(first.pk, second.pk)
        self.assertEqual(first.slug, Category.OTHER_ITEMS_SLUG)
        self.assertEqual(Category.objects.count(), 1)

    def test_legacy_uncategorized_row_becomes_other_items(self):
        legacy = _category("Uncategorized")
        product = Product.objects.create(name="Loose Shell", price_cents=500, category="Uncategorized")

        other = ensure_other_items()

        self.assertEqual(other.pk, legacy.pk)
        self.assertEqual(other.name, "Other Items")
        product.refresh_from_db()
        self.assertEqual(product.category, "other-items")


class PublicCategoryListTests(TestCase):
    def test_lists_in_shop_order_with_other_items(self):
        _category("Decor", image_url="https://img.example.com/decor.jpg")

        res = APIClient().get(reverse("category-list"))

        self.assertEqual(res.status_code, 200)
        body = res.json()["categories"]
        self.assertEqual([c["slug"] for c in body], ["decor", "other-items"])
        self.assertEqual(body[0]["imageUrl"], "https://img.example.com/decor.jpg")
        # hero falls back to the tile image
        self.assertEqual(body[0]["heroImageUrl"], "https://img.example.com/decor.jpg")
        self.assertTrue(body[1]["showOnHomePage"])


class AdminCategoryTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(
            username="owner", password="pass12345", is_staff=True
        )
        self.client.force_authenticate(self.admin)
        self.list_url = reverse("admin-category-list")

    def _detail(self, category_id):
        return reverse("admin-category-detail", args=[category_id])

    def test_requires_staff(self):
        res = APIClient().get(self.list_url)
        self.assertIn(res.status_code, (401, 403))

    def test_create_slugifies_name(self):
        res = self.client.post(
            self.list_url,
            {"name": "  Wine Stoppers ", "showOnHomePage": True},
            format="json",
        )

        self.assertEqual(res.status_code, 201)
        body = res.json()["category"]
        self.assertEqual(body["name"], "Wine Stoppers")
        self.assertEqual(body["slug"], "wine-stoppers")
        self.assertTrue(body["showOnHomePage"])

    def test_create_requires_name(self):
        res = self.client.post(self.list_url, {"name": "  "}, format="json")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["error"], "name is required")

    def test_create_rejects_inline_images(self):
        res = self.client.post(
            self.list_url,
            {"name": "Decor", "imageUrl": "data:image/png;base64,AAAA"},
            format="json",
        )
        self.assertEqual(res.status_code, 400)

    def test_update_renames_and_reslugs(self):
        category = _category("Decor")

        res = self.client.put(self._detail(category.id), {"name": "Home Decor"}, format="json")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["category"]["slug"], "home-decor")

    def test_update_without_fields_is_400(self):
        category = _category("Decor")

        res = self.client.put(self._detail(category.id), {}, format="json")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["error"], "No fields to update")

    def test_update_missing_category_is_404(self):
        res = self.client.put(self._detail("nope"), {"name": "X"}, format="json")

        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.json()["error"], "Category not found")

    def test_delete_moves_products_to_other_items(self):
        category = _category("Coasters")
        coaster = Product.objects.create(name="Crab Coaster", price_cents=1200, category="Coasters")
        dish = Product.objects.create(name="Oyster Dish", price_cents=1800, category="decor")

        res = self.client.delete(self._detail(category.id))

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), {"success": True})
        self.assertFalse(Category.objects.filter(id=category.id).exists())
        coaster.refresh_from_db()
        dish.refresh_from_db()
        self.assertEqual(coaster.category, "other-items")
        self.assertEqual(dish.category, "decor")

    def test_other_items_cannot_be_deleted(self):
        other = ensure_other_items()

        res = self.client.delete(self._detail(other.id))

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["error"], "Cannot delete Other Items category")
        self.assertTrue(Category.objects.filter(id=other.id).exists())
