# products/views/product.py

"""
PUBLIC CATALOG

GET /api/products/         active products, newest first
GET /api/products/<id>/    one active product (404 otherwise)

Rules:
- AllowAny, read-only
- Inactive products never leak to the storefront
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import generics
from rest_framework.permissions import AllowAny

from backend.throttles import PublicCatalogThrottle
from products.models import Product
from products.serializers import PublicProductSerializer


class PublicProductListView(generics.ListAPIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicCatalogThrottle]
    serializer_class = PublicProductSerializer
    pagination_class = None
    filterset_fields = ["category", "collection", "is_sold"]

    def get_queryset(self):
        return Product.objects.filter(is_active=True).order_by("-created_at")

    @extend_schema(
        tags=["Public"],
        parameters=[
            OpenApiParameter("category", str, OpenApiParameter.QUERY, required=False),
            OpenApiParameter("collection", str, OpenApiParameter.QUERY, required=False),
        ],
        description="Active storefront products, newest first.",
    )
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)


class PublicProductDetailView(generics.RetrieveAPIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicCatalogThrottle]
    serializer_class = PublicProductSerializer
    lookup_url_kwarg = "product_id"

    def get_queryset(self):
        return Product.objects.filter(is_active=True)

    @extend_schema(tags=["Public"])
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)
