# custom_orders/serializers.py

"""
CUSTOM ORDER SERIALIZERS

Wire shape is camelCase (admin SPA). Input strings are trimmed; image URLs
must already be uploaded (no data:/blob: URLs).
"""

from __future__ import annotations

from rest_framework import serializers

from custom_orders.models import CustomOrder

BLOCKED_IMAGE_PREFIXES = ("data:", "blob:")


def is_blocked_image_url(value) -> bool:
    if not value:
        return False
    return str(value).strip().lower().startswith(BLOCKED_IMAGE_PREFIXES)


class CustomOrderSerializer(serializers.ModelSerializer):
    displayCustomOrderId = serializers.SerializerMethodField()
    customerName = serializers.CharField(source="customer_name")
    customerEmail = serializers.CharField(source="customer_email")
    imageUrl = serializers.CharField(source="image_url", allow_null=True)
    messageId = serializers.UUIDField(source="message_id", allow_null=True)
    paymentLink = serializers.CharField(source="payment_link", allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")
    paidAt = serializers.DateTimeField(source="paid_at", allow_null=True)
    shippingAddress = serializers.JSONField(source="shipping_address")
    shippingName = serializers.SerializerMethodField()

    class Meta:
        model = CustomOrder
        fields = [
            "id",
            "displayCustomOrderId",
            "customerName",
            "customerEmail",
            "description",
            "imageUrl",
            "amount",
            "messageId",
            "status",
            "paymentLink",
            "createdAt",
            "paidAt",
            "shippingAddress",
            "shippingName",
        ]
        read_only_fields = fields

    def get_displayCustomOrderId(self, obj) -> str:
        return obj.display_custom_order_id or ""

    def get_shippingName(self, obj) -> str | None:
        return obj.shipping_name or None


class CustomOrderCreateSerializer(serializers.Serializer):
    customerName = serializers.CharField(allow_blank=True, required=False, trim_whitespace=True)
    customerEmail = serializers.CharField(allow_blank=True, required=False, trim_whitespace=True)
    description = serializers.CharField(allow_blank=True, required=False, trim_whitespace=True)
    imageUrl = serializers.CharField(
        allow_blank=True, allow_null=True, required=False, max_length=2000
    )
    amount = serializers.IntegerField(allow_null=True, required=False, min_value=0)
    messageId = serializers.UUIDField(allow_null=True, required=False)
    status = serializers.CharField(allow_blank=True, allow_null=True, required=False)
    paymentLink = serializers.CharField(
        allow_blank=True, allow_null=True, required=False, max_length=2000
    )

    def validate(self, attrs):
        if not (
            attrs.get("customerName")
            and attrs.get("customerEmail")
            and attrs.get("description")
        ):
            raise serializers.ValidationError(
                "customerName, customerEmail, and description are required."
            )
        if is_blocked_image_url(attrs.get("imageUrl")):
            raise serializers.ValidationError(
                "imageUrl must be uploaded first (no blob/data URLs)."
            )
        return attrs

    def to_model_fields(self) -> dict:
        data = self.validated_data
        return {
            "customer_name": data["customerName"],
            "customer_email": data["customerEmail"],
            "description": data["description"],
            "image_url": (data.get("imageUrl") or "").strip() or None,
            "amount": data.get("amount"),
            "message_id": data.get("messageId"),
            "status": CustomOrder.normalize_status(data.get("status")),
            "payment_link": (data.get("paymentLink") or "").strip() or None,
        }


class CustomOrderUpdateSerializer(serializers.Serializer):
    """
    PATCH body. Only keys present in the request are applied.
    """

    customerName = serializers.CharField(
        required=False, error_messages={"blank": "customerName cannot be empty"}
    )
    customerEmail = serializers.CharField(
        required=False, error_messages={"blank": "customerEmail cannot be empty"}
    )
    description = serializers.CharField(
        required=False, error_messages={"blank": "description cannot be empty"}
    )
    amount = serializers.IntegerField(allow_null=True, required=False, min_value=0)
    messageId = serializers.UUIDField(allow_null=True, required=False)
    status = serializers.CharField(allow_blank=True, allow_null=True, required=False)
    paymentLink = serializers.CharField(
        allow_blank=True, allow_null=True, required=False, max_length=2000
    )

    FIELD_MAP = {
        "customerName": "customer_name",
        "customerEmail": "customer_email",
        "description": "description",
        "amount": "amount",
        "messageId": "message_id",
        "status": "status",
        "paymentLink": "payment_link",
    }

    def to_model_changes(self) -> dict:
        changes = {}
        for wire_name, value in self.validated_data.items():
            if wire_name == "status":
                value = CustomOrder.normalize_status(value)
            elif isinstance(value, str):
                value = value.strip()
            if wire_name == "paymentLink":
                value = value or None
            changes[self.FIELD_MAP[wire_name]] = value
        return changes
