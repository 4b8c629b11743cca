# custom_orders/views/custom_orders.py

"""
ADMIN CUSTOM ORDERS

GET   /api/admin/custom-orders/          -> {orders: [...]} newest first
POST  /api/admin/custom-orders/          -> {success, order}
PATCH /api/admin/custom-orders/<uuid>/   -> {success, order}
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.parsers import JSONParser
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.http import error_response, first_error, no_store
from custom_orders.models import CustomOrder
from custom_orders.serializers import (
    CustomOrderCreateSerializer,
    CustomOrderSerializer,
    CustomOrderUpdateSerializer,
)
from custom_orders.services.exceptions import CustomOrderServiceError
from custom_orders.services.orders import create_from_admin, update_from_admin

logger = logging.getLogger(__name__)


class CustomOrderListCreateView(APIView):
    parser_classes = [JSONParser]

    @extend_schema(tags=["Admin"], responses={200: CustomOrderSerializer(many=True)})
    def get(self, request, *args, **kwargs):
        try:
            orders = CustomOrder.objects.order_by("-created_at")
            data = CustomOrderSerializer(orders, many=True).data
        except Exception:
            logger.exception("Failed to fetch custom orders")
            return no_store(error_response("Failed to fetch custom orders", status=500))

        return no_store(Response({"orders": data}))

    @extend_schema(
        tags=["Admin"],
        request=CustomOrderCreateSerializer,
        responses={
            200: OpenApiResponse(description="{success, order}"),
            400: OpenApiResponse(description="Validation error"),
        },
    )
    def post(self, request, *args, **kwargs):
        s = CustomOrderCreateSerializer(data=request.data)
        if not s.is_valid():
            return no_store(error_response(first_error(s.errors), status=400))

        try:
            order = create_from_admin(s.to_model_fields())
        except CustomOrderServiceError as exc:
            return no_store(error_response(exc.error, status=exc.status_code, detail=exc.detail))
        except Exception:
            logger.exception("Failed to create custom order")
            return no_store(error_response("Failed to create custom order", status=500))

        return no_store(
            Response({"success": True, "order": CustomOrderSerializer(order).data})
        )


class CustomOrderDetailView(APIView):
    parser_classes = [JSONParser]

    @extend_schema(
        tags=["Admin"],
        request=CustomOrderUpdateSerializer,
        responses={
            200: OpenApiResponse(description="{success, order}"),
            400: OpenApiResponse(description="No fields / invalid body"),
            404: OpenApiResponse(description="Not found"),
        },
    )
    def patch(self, request, order_id, *args, **kwargs):
        if not isinstance(request.data, dict):
            return no_store(error_response("Invalid body", status=400))

        s = CustomOrderUpdateSerializer(data=request.data, partial=True)
        if not s.is_valid():
            return no_store(error_response(first_error(s.errors), status=400))

        try:
            order = update_from_admin(order_id, s.to_model_changes())
        except CustomOrderServiceError as exc:
            return no_store(error_response(exc.error, status=exc.status_code, detail=exc.detail))
        except Exception:
            logger.exception(
                "Failed to update custom order", extra={"custom_order_id": str(order_id)}
            )
            return no_store(error_response("Failed to update custom order", status=500))

        return no_store(
            Response({"success": True, "order": CustomOrderSerializer(order).data})
        )
