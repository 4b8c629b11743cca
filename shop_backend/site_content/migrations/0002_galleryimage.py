"""
======================================================
PATH: site_content/migrations/0002_galleryimage.py
======================================================
MIGRATION: CREATE GalleryImage
"""

from __future__ import annotations

import django.utils.timezone
from django.db import migrations, models

import site_content.models.gallery_image


class Migration(migrations.Migration):
    dependencies = [
        ("site_content", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="GalleryImage",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=site_content.models.gallery_image._new_image_id,
                        max_length=64,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("image_url", models.URLField(max_length=2000)),
                ("alt_text", models.CharField(blank=True, default="", max_length=255)),
                ("is_active", models.BooleanField(default=True)),
                ("position", models.IntegerField(default=0)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "ordering": ["position", "created_at"],
            },
        ),
    ]
