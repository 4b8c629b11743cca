"""
======================================================
PATH: products/migrations/0001_initial.py
======================================================
MIGRATION: CREATE Product (storefront catalog)
"""

from __future__ import annotations

from django.db import migrations, models

import products.models.product


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=products.models.product._new_product_id,
                        editable=False,
                        max_length=64,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(db_index=True, max_length=255)),
                ("slug", models.SlugField(blank=True, default="", max_length=255)),
                ("description", models.TextField(blank=True, default="")),
                ("price_cents", models.PositiveIntegerField(blank=True, null=True)),
                ("category", models.CharField(blank=True, default="", max_length=120)),
                ("collection", models.CharField(blank=True, default="", max_length=120)),
                ("image_url", models.URLField(blank=True, default="", max_length=2000)),
                ("image_urls", models.JSONField(blank=True, default=list)),
                ("is_active", models.BooleanField(default=True)),
                ("is_one_off", models.BooleanField(default=False)),
                ("is_sold", models.BooleanField(default=False)),
                ("quantity_available", models.IntegerField(blank=True, null=True)),
                ("stripe_price_id", models.CharField(blank=True, default="", max_length=128)),
                (
                    "stripe_product_id",
                    models.CharField(blank=True, db_index=True, default="", max_length=128),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["is_active", "created_at"],
                        name="product_active_created_idx",
                    )
                ],
            },
        ),
    ]
