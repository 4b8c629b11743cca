# categories/views/categories.py

"""
CATEGORIES

GET    /api/categories/                  -> {categories} (public, shop order)
GET    /api/admin/categories/            -> {categories}
POST   /api/admin/categories/            {name, slug?, imageUrl?, heroImageUrl?, showOnHomePage?}
                                         -> 201 {category}
PUT    /api/admin/categories/<id>/       partial update -> {category}
DELETE /api/admin/categories/<id>/       products move to Other Items -> {success}
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.parsers import JSONParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.http import error_response, first_error, no_store
from backend.throttles import PublicCatalogThrottle
from categories.serializers import CategorySerializer, CategoryWriteSerializer
from categories.services.catalog import (
    create_category,
    delete_category,
    list_categories,
    update_category,
)
from categories.services.exceptions import CategoryError

logger = logging.getLogger(__name__)


def _categories_response() -> Response:
    try:
        data = CategorySerializer(list_categories(), many=True).data
    except Exception:
        logger.exception("Failed to load categories")
        return error_response("Failed to load categories", status=500)
    return Response({"categories": data})


class PublicCategoryListView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(tags=["Public"], responses={200: OpenApiResponse(description="{categories}")})
    def get(self, request, *args, **kwargs):
        return _categories_response()


class AdminCategoryListCreateView(APIView):
    parser_classes = [JSONParser]

    @extend_schema(tags=["Admin"], responses={200: OpenApiResponse(description="{categories}")})
    def get(self, request, *args, **kwargs):
        return no_store(_categories_response())

    @extend_schema(
        tags=["Admin"],
        request=CategoryWriteSerializer,
        responses={
            201: OpenApiResponse(description="{category}"),
            400: OpenApiResponse(description="name is required"),
        },
    )
    def post(self, request, *args, **kwargs):
        s = CategoryWriteSerializer(data=request.data)
        if not s.is_valid():
            return no_store(error_response(first_error(s.errors), status=400))

        try:
            category = create_category(s.to_model_changes())
        except CategoryError as exc:
            return no_store(error_response(exc.error, status=exc.status_code, detail=exc.detail))
        except Exception:
            logger.exception("Failed to create category")
            return no_store(error_response("Failed to create category", status=500))

        return no_store(Response({"category": CategorySerializer(category).data}, status=201))


class AdminCategoryDetailView(APIView):
    parser_classes = [JSONParser]

    @extend_schema(
        tags=["Admin"],
        request=CategoryWriteSerializer,
        responses={
            200: OpenApiResponse(description="{category}"),
            400: OpenApiResponse(description="No fields to update"),
            404: OpenApiResponse(description="Category not found"),
        },
    )
    def put(self, request, category_id, *args, **kwargs):
        if not isinstance(request.data, dict):
            return no_store(error_response("Invalid JSON", status=400))

        s = CategoryWriteSerializer(data=request.data, partial=True)
        if not s.is_valid():
            return no_store(error_response(first_error(s.errors), status=400))

        try:
            category = update_category(category_id, s.to_model_changes())
        except CategoryError as exc:
            return no_store(error_response(exc.error, status=exc.status_code, detail=exc.detail))
        except Exception:
            logger.exception("Failed to update category", extra={"category_id": category_id})
            return no_store(error_response("Failed to update category", status=500))

        return no_store(Response({"category": CategorySerializer(category).data}))

    def patch(self, request, category_id, *args, **kwargs):
        return self.put(request, category_id, *args, **kwargs)

    @extend_schema(
        tags=["Admin"],
        responses={
            200: OpenApiResponse(description="{success}"),
            400: OpenApiResponse(description="Cannot delete Other Items category"),
            404: OpenApiResponse(description="Category not found"),
        },
    )
    def delete(self, request, category_id, *args, **kwargs):
        try:
            delete_category(category_id)
        except CategoryError as exc:
            return no_store(error_response(exc.error, status=exc.status_code, detail=exc.detail))
        except Exception:
            logger.exception("Failed to delete category", extra={"category_id": category_id})
            return no_store(error_response("Failed to delete category", status=500))

        return no_store(Response({"success": True}))
