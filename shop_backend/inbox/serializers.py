# inbox/serializers.py

"""
INBOX SERIALIZERS

Public input is trimmed before validation: "   " counts as missing.
"""

from __future__ import annotations

from rest_framework import serializers

from inbox.models import Message


class MessageCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, allow_blank=True, required=False)
    email = serializers.CharField(max_length=254, allow_blank=True, required=False)
    message = serializers.CharField(allow_blank=True, required=False)
    imageUrl = serializers.CharField(
        max_length=2000, allow_blank=True, allow_null=True, required=False
    )

    def validate(self, attrs):
        name = (attrs.get("name") or "").strip()
        email = (attrs.get("email") or "").strip()
        message = (attrs.get("message") or "").strip()
        if not name or not email or not message:
            raise serializers.ValidationError("Name, email, and message are required.")

        return {
            "name": name,
            "email": email,
            "message": message,
            "image_url": (attrs.get("imageUrl") or "").strip() or None,
        }


class AdminMessageSerializer(serializers.ModelSerializer):
    imageUrl = serializers.CharField(source="image_url", allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")

    class Meta:
        model = Message
        fields = ["id", "name", "email", "message", "imageUrl", "createdAt", "status"]
        read_only_fields = fields
