# notifications/tests/test_mailer.py

import json
from unittest.mock import MagicMock, patch
from urllib.error import URLError

from django.test import SimpleTestCase, override_settings

from notifications.services.mailer import DEFAULT_FROM_EMAIL, send_email

RESEND_CFG = {"API_KEY": "re_test", "FROM": "Shop <shop@example.com>", "REPLY_TO": ""}


def _fake_response(payload: dict):
    resp = MagicMock()
    resp.read.return_value = json.dumps(payload).encode("utf-8")
    resp.__enter__.return_value = resp
    return resp


class SendEmailTests(SimpleTestCase):
    @override_settings(RESEND={"API_KEY": "", "FROM": "", "REPLY_TO": ""})
    def test_missing_api_key_is_reported_not_raised(self):
        result = send_email(to="a@b.co", subject="Hi", text="Body")

        self.assertFalse(result.ok)
        self.assertIn("RESEND_API_KEY", result.error)

    @override_settings(RESEND=RESEND_CFG)
    def test_missing_body_rejected(self):
        result = send_email(to="a@b.co", subject="Hi")
        self.assertFalse(result.ok)

    @override_settings(RESEND=RESEND_CFG)
    @patch("notifications.services.mailer.urlopen")
    def test_posts_to_resend_and_returns_id(self, mock_urlopen):
        mock_urlopen.return_value = _fake_response({"id": "email_123"})

        result = send_email(to="a@b.co", subject="Hi", html="<p>Hi</p>", text="Hi")

        self.assertTrue(result.ok)
        self.assertEqual(result.id, "email_123")

        req = mock_urlopen.call_args.args[0]
        body = json.loads(req.data.decode("utf-8"))
        self.assertEqual(body["from"], "Shop <shop@example.com>")
        self.assertEqual(body["to"], ["a@b.co"])
        self.assertEqual(req.get_header("Authorization"), "Bearer re_test")

    @override_settings(RESEND={"API_KEY": "re_test", "FROM": "", "REPLY_TO": ""})
    @patch("notifications.services.mailer.urlopen")
    def test_default_sender_used_when_unset(self, mock_urlopen):
        mock_urlopen.return_value = _fake_response({"id": "e"})

        send_email(to="a@b.co", subject="Hi", text="Hi")

        body = json.loads(mock_urlopen.call_args.args[0].data.decode("utf-8"))
        self.assertEqual(body["from"], DEFAULT_FROM_EMAIL)

    @override_settings(RESEND=RESEND_CFG)
    @patch("notifications.services.mailer.urlopen", side_effect=URLError("down"))
    def test_network_failure_returns_error(self, _mock):
        result = send_email(to="a@b.co", subject="Hi", text="Hi")

        self.assertFalse(result.ok)
        self.assertIn("URLError", result.error)
