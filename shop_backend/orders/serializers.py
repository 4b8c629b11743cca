# orders/serializers.py

"""
ADMIN ORDER SERIALIZERS (read-only)
"""

from __future__ import annotations

from rest_framework import serializers

from orders.models import Order, OrderItem


class AdminOrderItemSerializer(serializers.ModelSerializer):
    productId = serializers.CharField(source="product_id", allow_null=True)
    productName = serializers.CharField(source="product.name", default=None)
    priceCents = serializers.IntegerField(source="price_cents")

    class Meta:
        model = OrderItem
        fields = ["productId", "productName", "quantity", "priceCents"]
        read_only_fields = fields


class AdminOrderSerializer(serializers.ModelSerializer):
    displayOrderId = serializers.CharField(source="display_order_id", allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")
    totalCents = serializers.IntegerField(source="total_cents")
    shippingCents = serializers.IntegerField(source="shipping_cents")
    customerEmail = serializers.CharField(source="customer_email")
    customerName = serializers.CharField(source="shipping_name")
    shippingName = serializers.CharField(source="shipping_name")
    shippingAddress = serializers.JSONField(source="shipping_address")
    cardLast4 = serializers.CharField(source="card_last4")
    cardBrand = serializers.CharField(source="card_brand")
    items = AdminOrderItemSerializer(many=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "displayOrderId",
            "createdAt",
            "totalCents",
            "shippingCents",
            "customerEmail",
            "customerName",
            "shippingName",
            "shippingAddress",
            "cardLast4",
            "cardBrand",
            "items",
        ]
        read_only_fields = fields
