# products/serializers/admin_product.py

"""
ADMIN PRODUCT SERIALIZERS

Output adds the fields the storefront never sees (isActive).
Input is camelCase; to_model_fields()/to_model_changes() map to columns.
"""

from __future__ import annotations

from rest_framework import serializers

from products.serializers.product import PublicProductSerializer

FIELD_MAP = {
    "name": "name",
    "description": "description",
    "priceCents": "price_cents",
    "category": "category",
    "collection": "collection",
    "imageUrl": "image_url",
    "imageUrls": "image_urls",
    "quantityAvailable": "quantity_available",
    "isOneOff": "is_one_off",
    "isActive": "is_active",
    "stripePriceId": "stripe_price_id",
    "stripeProductId": "stripe_product_id",
}


class AdminProductSerializer(PublicProductSerializer):
    isActive = serializers.BooleanField(source="is_active")

    class Meta(PublicProductSerializer.Meta):
        fields = [*PublicProductSerializer.Meta.fields, "isActive"]
        read_only_fields = fields


class ProductWriteSerializer(serializers.Serializer):
    name = serializers.CharField(allow_blank=True, required=False, max_length=255)
    description = serializers.CharField(allow_blank=True, required=False)
    priceCents = serializers.IntegerField(
        allow_null=True,
        required=False,
        min_value=0,
        error_messages={"min_value": "priceCents must be non-negative"},
    )
    category = serializers.CharField(allow_blank=True, required=False, max_length=120)
    collection = serializers.CharField(
        allow_blank=True, allow_null=True, required=False, max_length=120
    )
    imageUrl = serializers.CharField(allow_blank=True, required=False)
    imageUrls = serializers.ListField(
        child=serializers.CharField(), required=False, allow_empty=True
    )
    quantityAvailable = serializers.IntegerField(allow_null=True, required=False, min_value=0)
    isOneOff = serializers.BooleanField(required=False)
    isActive = serializers.BooleanField(required=False)
    stripePriceId = serializers.CharField(allow_blank=True, allow_null=True, required=False)
    stripeProductId = serializers.CharField(allow_blank=True, allow_null=True, required=False)

    def validate(self, attrs):
        if self.partial:
            if "name" in attrs and not attrs["name"].strip():
                raise serializers.ValidationError("name cannot be empty")
            return attrs

        if not (
            (attrs.get("name") or "").strip()
            and (attrs.get("description") or "").strip()
            and attrs.get("priceCents") is not None
        ):
            raise serializers.ValidationError("name, description, and priceCents are required")
        if not (attrs.get("category") or "").strip():
            raise serializers.ValidationError("category is required")
        if not (attrs.get("imageUrl") or "").strip():
            raise serializers.ValidationError("imageUrl is required")
        return attrs

    def to_model_fields(self) -> dict:
        fields = {}
        for wire_name, value in self.validated_data.items():
            if isinstance(value, str):
                value = value.strip()
            fields[FIELD_MAP[wire_name]] = value
        return fields

    to_model_changes = to_model_fields
