# backend/tests/test_health.py

from unittest.mock import patch

from django.db.utils import OperationalError
from django.test import TestCase
from rest_framework.test import APIClient


class HealthCheckTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_ok_when_database_answers(self):
        res = self.client.get("/api/health/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), {"status": "ok", "db": "ok"})

    def test_degraded_when_database_is_down(self):
        with patch("backend.urls.connections") as mock_connections:
            mock_connections.__getitem__.return_value.cursor.side_effect = OperationalError("gone")
            res = self.client.get("/api/health/")

        self.assertEqual(res.status_code, 503)
        self.assertEqual(res.json()["db"], "down")

    def test_root_lists_modules(self):
        res = self.client.get("/api/")

        self.assertEqual(res.status_code, 200)
        self.assertIn("checkout", res.json()["modules"])
