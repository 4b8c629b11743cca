# categories/serializers.py

"""
CATEGORY SERIALIZERS

Wire shape: {id, name, slug, imageUrl, heroImageUrl, showOnHomePage}.
Image fields must be plain URLs (uploads go through /api/admin/images/upload/).
"""

from __future__ import annotations

from rest_framework import serializers

from categories.models import Category
from site_content.services.home import is_invalid_image_url


class CategorySerializer(serializers.ModelSerializer):
    imageUrl = serializers.CharField(source="image_url")
    heroImageUrl = serializers.CharField(source="hero_image_url")
    showOnHomePage = serializers.BooleanField(source="show_on_homepage")

    class Meta:
        model = Category
        fields = ["id", "name", "slug", "imageUrl", "heroImageUrl", "showOnHomePage"]
        read_only_fields = fields

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data["imageUrl"] = data["imageUrl"] or None
        data["heroImageUrl"] = data["heroImageUrl"] or instance.image_url or None
        return data


class CategoryWriteSerializer(serializers.Serializer):
    """
    POST and PUT body. Only keys present in the request are applied on PUT.
    """

    name = serializers.CharField(allow_blank=True, required=False, max_length=120)
    slug = serializers.CharField(allow_blank=True, allow_null=True, required=False, max_length=120)
    imageUrl = serializers.CharField(
        allow_blank=True, allow_null=True, required=False, trim_whitespace=True
    )
    heroImageUrl = serializers.CharField(
        allow_blank=True, allow_null=True, required=False, trim_whitespace=True
    )
    showOnHomePage = serializers.BooleanField(required=False)

    FIELD_MAP = {
        "name": "name",
        "slug": "slug",
        "imageUrl": "image_url",
        "heroImageUrl": "hero_image_url",
        "showOnHomePage": "show_on_homepage",
    }

    def _image(self, value):
        if is_invalid_image_url(value):
            raise serializers.ValidationError("Images must be uploaded first; only URLs allowed.")
        return value

    def validate_imageUrl(self, value):
        return self._image(value)

    def validate_heroImageUrl(self, value):
        return self._image(value)

    def to_model_changes(self) -> dict:
        return {self.FIELD_MAP[key]: value for key, value in self.validated_data.items()}
