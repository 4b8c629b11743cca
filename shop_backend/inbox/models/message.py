# inbox/models/message.py

import uuid

from django.db import models


class Message(models.Model):
    """
    Storefront contact-form submission.

    Written by the public form, read/deleted by the admin. An admin may
    promote a message into a custom order (the order keeps an optional
    reference back here).
    """

    STATUS_NEW = "new"
    STATUS_READ = "read"

    STATUS_CHOICES = (
        (STATUS_NEW, "New"),
        (STATUS_READ, "Read"),
    )

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255)
    email = models.EmailField()
    message = models.TextField()
    image_url = models.URLField(max_length=2000, null=True, blank=True)

    status = models.CharField(
        max_length=16, choices=STATUS_CHOICES, default=STATUS_NEW, db_index=True
    )

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.name} <{self.email}>"
