# backend/throttles.py
"""
ANONYMOUS THROTTLE SCOPES

Rates live in REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"] under the same scope
names (THROTTLE_*_RATE in the environment).

- public_write:   storefront writes (contact form, checkout session create)
- public_catalog: storefront reads (products, categories, gallery, site content)
- webhook:        provider callbacks
"""

from __future__ import annotations

from rest_framework.throttling import AnonRateThrottle


class PublicWriteThrottle(AnonRateThrottle):
    scope = "public_write"


class PublicCatalogThrottle(AnonRateThrottle):
    scope = "public_catalog"


class WebhookThrottle(AnonRateThrottle):
    scope = "webhook"
