# public/serializers.py

from rest_framework import serializers


class CheckoutItemSerializer(serializers.Serializer):
    productId = serializers.CharField(
        max_length=128,
        error_messages={"required": "productId is required", "blank": "productId is required"},
    )
    quantity = serializers.IntegerField(required=False, min_value=1, default=1)


class CheckoutSessionCreateSerializer(serializers.Serializer):
    items = CheckoutItemSerializer(
        many=True,
        allow_empty=False,
        error_messages={
            "required": "items is required",
            "empty": "items is required",
            "not_a_list": "items must be a list",
        },
    )

    def to_service_items(self) -> list[dict]:
        return [dict(item) for item in self.validated_data["items"]]
