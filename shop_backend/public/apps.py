# public/apps.py

"""
PUBLIC APP CONFIG

Storefront payment surface (AllowAny):
- cart checkout session (embedded)
- return-page session lookup
- Stripe webhook
"""

from django.apps import AppConfig


class PublicConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "public"
    verbose_name = "Storefront Payments"
