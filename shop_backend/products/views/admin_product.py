# products/views/admin_product.py

"""
ADMIN CATALOG

GET    /api/admin/products/          -> {products} every product, newest first
POST   /api/admin/products/          -> 201 {product[, error]}
PUT    /api/admin/products/<id>/     partial update -> {product}
DELETE /api/admin/products/<id>/     -> {success}

Rules:
- staff only (project default permission)
- POST answers 201 even when Stripe setup failed; `error` then says why
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.parsers import JSONParser
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.http import error_response, first_error, no_store
from products.models import Product
from products.serializers import AdminProductSerializer, ProductWriteSerializer
from products.services.admin_catalog import create_product, delete_product, update_product
from products.services.exceptions import ProductServiceError

logger = logging.getLogger(__name__)


class AdminProductListCreateView(APIView):
    parser_classes = [JSONParser]

    @extend_schema(tags=["Admin"], responses={200: OpenApiResponse(description="{products}")})
    def get(self, request, *args, **kwargs):
        try:
            products = Product.objects.order_by("-created_at")
            data = AdminProductSerializer(products, many=True).data
        except Exception:
            logger.exception("Failed to load products")
            return no_store(error_response("Internal server error", status=500))

        return no_store(Response({"products": data}))

    @extend_schema(
        tags=["Admin"],
        request=ProductWriteSerializer,
        responses={
            201: OpenApiResponse(description="{product[, error]}"),
            400: OpenApiResponse(description="Validation error"),
            413: OpenApiResponse(description="Inline image data"),
        },
    )
    def post(self, request, *args, **kwargs):
        s = ProductWriteSerializer(data=request.data)
        if not s.is_valid():
            return no_store(error_response(first_error(s.errors), status=400))

        try:
            product, stripe_error = create_product(s.to_model_fields())
        except ProductServiceError as exc:
            return no_store(error_response(exc.error, status=exc.status_code, detail=exc.detail))
        except Exception:
            logger.exception("Failed to create product")
            return no_store(error_response("Internal server error", status=500))

        body = {"product": AdminProductSerializer(product).data}
        if stripe_error:
            body["error"] = stripe_error
        return no_store(Response(body, status=201))


class AdminProductDetailView(APIView):
    parser_classes = [JSONParser]

    @extend_schema(
        tags=["Admin"],
        request=ProductWriteSerializer,
        responses={
            200: OpenApiResponse(description="{product}"),
            400: OpenApiResponse(description="No fields to update / invalid value"),
            404: OpenApiResponse(description="Product not found"),
            413: OpenApiResponse(description="Inline image data"),
        },
    )
    def put(self, request, product_id, *args, **kwargs):
        if not isinstance(request.data, dict):
            return no_store(error_response("Invalid JSON", status=400))

        s = ProductWriteSerializer(data=request.data, partial=True)
        if not s.is_valid():
            return no_store(error_response(first_error(s.errors), status=400))

        try:
            product = update_product(product_id, s.to_model_changes())
        except ProductServiceError as exc:
            return no_store(error_response(exc.error, status=exc.status_code, detail=exc.detail))
        except Exception as exc:
            logger.exception("Failed to update product", extra={"product_id": product_id})
            return no_store(error_response("Update product failed", status=500, detail=str(exc)))

        return no_store(Response({"product": AdminProductSerializer(product).data}))

    def patch(self, request, product_id, *args, **kwargs):
        return self.put(request, product_id, *args, **kwargs)

    @extend_schema(
        tags=["Admin"],
        responses={
            200: OpenApiResponse(description="{success}"),
            404: OpenApiResponse(description="Product not found"),
        },
    )
    def delete(self, request, product_id, *args, **kwargs):
        try:
            delete_product(product_id)
        except ProductServiceError as exc:
            return no_store(error_response(exc.error, status=exc.status_code, detail=exc.detail))
        except Exception:
            logger.exception("Failed to delete product", extra={"product_id": product_id})
            return no_store(error_response("Internal server error", status=500))

        return no_store(Response({"success": True}))
