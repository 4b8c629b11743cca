# uploads/tests/test_upload.py

from datetime import datetime
from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.core.files.storage import storages
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from django.urls import reverse
from django.utils import timezone
from rest_framework.test import APIClient

from uploads.services.exceptions import InvalidUploadError
from uploads.services.images import MAX_UPLOAD_BYTES, build_key, normalize_scope

User = get_user_model()

MEMORY_STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.InMemoryStorage"},
    "staticfiles": {"BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"},
    "images": {"BACKEND": "django.core.files.storage.InMemoryStorage"},
}


def _image(name: str, content_type: str, size: int) -> SimpleUploadedFile:
    return SimpleUploadedFile(name, b"\0" * size, content_type=content_type)


@override_settings(
    STORAGES=MEMORY_STORAGES,
    PUBLIC_IMAGES_BASE_URL="https://images.example.com/",
    IMAGES_KEY_NAMESPACE="chesapeake-shell",
    R2_ACCOUNT_ID="",
    R2_ACCESS_KEY_ID="",
    R2_SECRET_ACCESS_KEY="",
    R2_BUCKET="",
)
class ImageUploadViewTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(
            username="owner", password="pass12345", is_staff=True
        )
        self.client.force_authenticate(self.admin)
        self.url = reverse("admin-image-upload")

    def test_requires_staff(self):
        res = APIClient().post(self.url, {}, format="multipart")
        self.assertIn(res.status_code, (401, 403))

    def test_png_is_stored_under_scope_and_month(self):
        res = self.client.post(
            self.url,
            {"file": _image("shell.png", "image/png", 2 * 1024 * 1024), "scope": "gallery"},
            format="multipart",
        )

        self.assertEqual(res.status_code, 200)
        self.assertIn("no-store", res["Cache-Control"])
        body = res.json()
        now = timezone.localtime()
        prefix = f"chesapeake-shell/gallery/{now.year:04d}/{now.month:02d}/"
        self.assertTrue(body["key"].startswith(prefix))
        self.assertTrue(body["key"].endswith(".png"))
        self.assertEqual(body["url"], f"https://images.example.com/{body['key']}")
        self.assertEqual(body["scope"], "gallery")
        self.assertEqual(body["contentType"], "image/png")
        self.assertEqual(body["size"], 2 * 1024 * 1024)
        self.assertTrue(storages["images"].exists(body["key"]))

    def test_files_array_field_is_accepted(self):
        res = self.client.post(
            self.url,
            {"files[]": _image("a.webp", "image/webp", 1024)},
            format="multipart",
        )

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["scope"], "products")
        self.assertTrue(res.json()["key"].endswith(".webp"))

    @patch("uploads.views.store_image")
    def test_oversize_upload_is_413_without_storage(self, mock_store):
        res = self.client.post(
            self.url,
            {"file": _image("big.jpg", "image/jpeg", 9 * 1024 * 1024)},
            format="multipart",
        )

        self.assertEqual(res.status_code, 413)
        self.assertEqual(res.json()["error"], "Upload too large")
        mock_store.assert_not_called()

    def test_unsupported_type_is_415(self):
        res = self.client.post(
            self.url,
            {"file": _image("anim.gif", "image/gif", 1024)},
            format="multipart",
        )
        self.assertEqual(res.status_code, 415)

    def test_unknown_scope_is_400(self):
        res = self.client.post(
            self.url,
            {"file": _image("a.jpg", "image/jpeg", 1024), "scope": "avatars"},
            format="multipart",
        )
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["error"], "Invalid scope")

    def test_missing_file_is_400(self):
        res = self.client.post(self.url, {"scope": "home"}, format="multipart")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["error"], "Missing file field")

    @patch("uploads.views.store_image")
    def test_malformed_multipart_body_is_400(self, mock_store):
        # no boundary parameter, so the multipart parser cannot split the body
        res = self.client.post(
            self.url, data=b"not really multipart", content_type="multipart/form-data"
        )

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["error"], "Invalid multipart body")
        self.assertIn("no-store", res["Cache-Control"])
        mock_store.assert_not_called()

    def test_json_body_is_rejected(self):
        res = self.client.post(self.url, {"file": "x"}, format="json")
        self.assertIn(res.status_code, (400, 415))

    @override_settings(PUBLIC_IMAGES_BASE_URL="")
    def test_missing_base_url_is_500_naming_it(self):
        res = self.client.post(
            self.url,
            {"file": _image("a.jpg", "image/jpeg", 1024)},
            format="multipart",
        )

        self.assertEqual(res.status_code, 500)
        self.assertEqual(res.json()["missing"], ["PUBLIC_IMAGES_BASE_URL"])

    @override_settings(R2_BUCKET="shop-images")
    def test_partial_bucket_config_names_missing_vars(self):
        res = self.client.post(
            self.url,
            {"file": _image("a.jpg", "image/jpeg", 1024)},
            format="multipart",
        )

        self.assertEqual(res.status_code, 500)
        self.assertEqual(
            res.json()["missing"],
            ["R2_ACCOUNT_ID", "R2_ACCESS_KEY_ID", "R2_SECRET_ACCESS_KEY"],
        )


class ImageKeyTests(TestCase):
    def test_scope_defaults_and_normalizes(self):
        self.assertEqual(normalize_scope(None), "products")
        self.assertEqual(normalize_scope("  HOME "), "home")
        with self.assertRaises(InvalidUploadError):
            normalize_scope("../etc")

    @override_settings(IMAGES_KEY_NAMESPACE="shop")
    def test_key_layout(self):
        moment = timezone.make_aware(datetime(2026, 3, 9, 12, 0))
        self.assertEqual(
            build_key("home", "jpg", image_id="abc", now=moment),
            "shop/home/2026/03/abc.jpg",
        )

    def test_limit_is_eight_mebibytes(self):
        self.assertEqual(MAX_UPLOAD_BYTES, 8 * 1024 * 1024)
