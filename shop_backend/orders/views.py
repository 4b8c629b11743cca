# orders/views.py

"""
ADMIN ORDERS

GET /api/admin/orders/   20 most recent orders, items joined to product names
"""

from __future__ import annotations

import logging

from django.db.models import Prefetch
from drf_spectacular.utils import extend_schema
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.http import error_response, no_store
from orders.models import Order, OrderItem
from orders.serializers import AdminOrderSerializer

logger = logging.getLogger(__name__)

RECENT_ORDERS_LIMIT = 20


class AdminOrderListView(APIView):
    @extend_schema(tags=["Admin"], responses={200: AdminOrderSerializer(many=True)})
    def get(self, request):
        try:
            orders = Order.objects.order_by("-created_at").prefetch_related(
                Prefetch(
                    "items",
                    queryset=OrderItem.objects.select_related("product"),
                )
            )[:RECENT_ORDERS_LIMIT]
            data = AdminOrderSerializer(orders, many=True).data
        except Exception:
            logger.exception("Failed to load admin orders")
            return error_response("Failed to load orders", status=500)

        return no_store(Response({"orders": data}))
