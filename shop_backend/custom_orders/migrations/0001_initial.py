"""
======================================================
PATH: custom_orders/migrations/0001_initial.py
======================================================
MIGRATION: CREATE DisplayIdCounter + CustomOrder
"""

from __future__ import annotations

import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("inbox", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="DisplayIdCounter",
            fields=[
                (
                    "year",
                    models.PositiveSmallIntegerField(primary_key=True, serialize=False),
                ),
                ("counter", models.PositiveIntegerField(default=0)),
            ],
        ),
        migrations.CreateModel(
            name="CustomOrder",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "display_custom_order_id",
                    models.CharField(blank=True, max_length=32, null=True, unique=True),
                ),
                ("customer_name", models.CharField(max_length=255)),
                ("customer_email", models.EmailField(max_length=254)),
                ("description", models.TextField()),
                ("image_url", models.URLField(blank=True, max_length=2000, null=True)),
                ("amount", models.PositiveIntegerField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[("pending", "Pending"), ("paid", "Paid")],
                        db_index=True,
                        default="pending",
                        max_length=16,
                    ),
                ),
                ("payment_link", models.URLField(blank=True, max_length=2000, null=True)),
                ("stripe_session_id", models.CharField(blank=True, default="", max_length=255)),
                (
                    "stripe_payment_intent_id",
                    models.CharField(blank=True, default="", max_length=255),
                ),
                ("paid_at", models.DateTimeField(blank=True, null=True)),
                ("shipping_name", models.CharField(blank=True, default="", max_length=255)),
                ("shipping_line1", models.CharField(blank=True, default="", max_length=255)),
                ("shipping_line2", models.CharField(blank=True, default="", max_length=255)),
                ("shipping_city", models.CharField(blank=True, default="", max_length=120)),
                ("shipping_state", models.CharField(blank=True, default="", max_length=120)),
                (
                    "shipping_postal_code",
                    models.CharField(blank=True, default="", max_length=32),
                ),
                ("shipping_country", models.CharField(blank=True, default="", max_length=2)),
                ("shipping_phone", models.CharField(blank=True, default="", max_length=40)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                (
                    "message",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="custom_orders",
                        to="inbox.message",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
    ]
