# notifications/services/mailer.py

"""
TRANSACTIONAL EMAIL (Resend HTTP API)

send_email() never raises for provider/network failures: the caller gets
EmailResult(ok=False, error=...) and the failure is logged. A payment link
that was already created must not be lost because the email bounced.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from django.conf import settings

logger = logging.getLogger(__name__)

RESEND_EMAILS_URL = "https://api.resend.com/emails"
DEFAULT_FROM_EMAIL = "The Chesapeake Shell <hello@thechesapeakeshell.com>"


@dataclass(frozen=True)
class EmailResult:
    ok: bool
    id: str = ""
    error: str = ""


def _resend_cfg() -> dict:
    cfg = getattr(settings, "RESEND", {}) or {}
    return cfg if isinstance(cfg, dict) else {}


def resolve_from_email() -> str:
    return (_resend_cfg().get("FROM") or "").strip() or DEFAULT_FROM_EMAIL


def _parse_json(raw: str) -> dict[str, Any]:
    try:
        parsed = json.loads(raw or "")
    except ValueError:
        return {}
    return parsed if isinstance(parsed, dict) else {}


def _post_json(url: str, *, api_key: str, body: dict, timeout: int = 20) -> dict:
    req = Request(
        url,
        data=json.dumps(body, ensure_ascii=False).encode("utf-8"),
        headers={
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        },
        method="POST",
    )

    try:
        with urlopen(req, timeout=timeout) as resp:
            return _parse_json(resp.read().decode("utf-8", errors="replace"))
    except HTTPError as e:
        try:
            raw = e.read().decode("utf-8", errors="replace")
        except OSError:
            raw = ""
        data = _parse_json(raw)
        msg = data.get("message") or data.get("error") or "Resend request failed"
        raise RuntimeError(f"Resend HTTPError: {e.code} {msg}") from e
    except URLError as e:
        raise RuntimeError(f"Resend URLError: {e}") from e


def send_email(
    *,
    to: str | list[str],
    subject: str,
    html: str = "",
    text: str = "",
    reply_to: str = "",
) -> EmailResult:
    cfg = _resend_cfg()
    api_key = (cfg.get("API_KEY") or "").strip()
    sender = resolve_from_email()
    reply_to = (cfg.get("REPLY_TO") or "").strip() or reply_to

    if not api_key:
        return EmailResult(ok=False, error="Missing RESEND_API_KEY or sender email")

    if not to or not subject or not (html or text):
        return EmailResult(ok=False, error="Missing to, subject, or body (html/text)")

    recipients = to if isinstance(to, list) else [to]
    payload: dict[str, Any] = {
        "from": sender,
        "to": recipients,
        "subject": subject,
    }
    if html:
        payload["html"] = html
    if text:
        payload["text"] = text
    if reply_to:
        payload["reply_to"] = reply_to

    logger.info("Sending email", extra={"to": recipients, "subject": subject})

    try:
        data = _post_json(RESEND_EMAILS_URL, api_key=api_key, body=payload)
    except RuntimeError as exc:
        logger.error("Email send failed", extra={"subject": subject, "error": str(exc)})
        return EmailResult(ok=False, error=str(exc))

    return EmailResult(ok=True, id=str(data.get("id") or ""))
