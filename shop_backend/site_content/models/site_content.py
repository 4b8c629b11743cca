# site_content/models/site_content.py

from django.db import models


class SiteContent(models.Model):
    """
    Admin-editable JSON blob for a page. Only the "home" row is used
    (hero images + custom order gallery); it is created on first read.
    """

    HOME_KEY = "home"

    key = models.CharField(primary_key=True, max_length=64)
    json = models.JSONField(default=dict)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.key
