# backend/config.py
"""
PATH: backend/config.py

RUNTIME CONFIGURATION GUARD

Handlers that talk to Stripe, Resend or object storage need credentials
that may be absent in a given deployment. Instead of crashing at import
time, each handler asks for the names it needs and answers with a 500
payload naming whatever is missing.
"""

from __future__ import annotations

from django.conf import settings


def _setting_lookups() -> dict:
    return {
        "STRIPE_SECRET_KEY": lambda: settings.PAYMENTS["STRIPE"]["SECRET_KEY"],
        "STRIPE_WEBHOOK_SECRET": lambda: settings.PAYMENTS["STRIPE"]["WEBHOOK_SECRET"],
        "PUBLIC_SITE_URL": lambda: settings.PUBLIC_SITE_URL,
        "RESEND_API_KEY": lambda: settings.RESEND["API_KEY"],
        "RESEND_FROM": lambda: settings.RESEND["FROM"],
        "PUBLIC_IMAGES_BASE_URL": lambda: settings.PUBLIC_IMAGES_BASE_URL,
        "IMAGES_STORAGE": lambda: settings.STORAGES.get("images", {}).get("BACKEND"),
    }


class MissingConfigurationError(RuntimeError):
    """Raised when required settings for a handler are empty."""

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(f"Missing configuration: {', '.join(self.missing)}")


def missing_settings(*names: str) -> list[str]:
    lookups = _setting_lookups()
    missing = []
    for name in names:
        getter = lookups.get(name)
        value = getter() if getter else getattr(settings, name, "")
        if not str(value or "").strip():
            missing.append(name)
    return missing


def require_settings(*names: str) -> None:
    missing = missing_settings(*names)
    if missing:
        raise MissingConfigurationError(missing)
