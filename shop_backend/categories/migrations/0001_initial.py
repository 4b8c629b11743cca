"""
======================================================
PATH: categories/migrations/0001_initial.py
======================================================
MIGRATION: CREATE Category (storefront shelves)
"""

from __future__ import annotations

from django.db import migrations, models

import categories.models.category


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Category",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=categories.models.category._new_category_id,
                        editable=False,
                        max_length=64,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(max_length=120)),
                ("slug", models.SlugField(max_length=120)),
                ("image_url", models.URLField(blank=True, default="", max_length=2000)),
                ("hero_image_url", models.URLField(blank=True, default="", max_length=2000)),
                ("show_on_homepage", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name_plural": "categories",
            },
        ),
    ]
