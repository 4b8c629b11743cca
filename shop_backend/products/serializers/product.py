# products/serializers/product.py

"""
PUBLIC PRODUCT SERIALIZER

Storefront shape (camelCase, matches the SPA client types).
"""

from rest_framework import serializers

from products.models import Product


class PublicProductSerializer(serializers.ModelSerializer):
    priceCents = serializers.IntegerField(source="price_cents", allow_null=True)
    imageUrl = serializers.CharField(source="image_url")
    imageUrls = serializers.SerializerMethodField()
    oneoff = serializers.BooleanField(source="is_one_off")
    isSold = serializers.BooleanField(source="is_sold")
    quantityAvailable = serializers.IntegerField(
        source="quantity_available", allow_null=True
    )
    stripeProductId = serializers.CharField(source="stripe_product_id")
    stripePriceId = serializers.CharField(source="stripe_price_id")
    createdAt = serializers.DateTimeField(source="created_at")

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "slug",
            "description",
            "priceCents",
            "category",
            "collection",
            "imageUrl",
            "imageUrls",
            "oneoff",
            "isSold",
            "quantityAvailable",
            "stripeProductId",
            "stripePriceId",
            "createdAt",
        ]
        read_only_fields = fields

    def get_imageUrls(self, obj) -> list[str]:
        urls = [u for u in (obj.image_urls or []) if isinstance(u, str) and u]
        if not urls and obj.image_url:
            urls = [obj.image_url]
        return urls
