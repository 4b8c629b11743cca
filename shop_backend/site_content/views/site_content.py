# site_content/views/site_content.py

"""
SITE CONTENT

GET /api/admin/site-content/   -> {key, json, updatedAt}
PUT /api/admin/site-content/   {key, json} | {home} -> {key, json, updatedAt}
GET /api/site-content/         -> the bare home JSON (public)
"""

from __future__ import annotations

import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.parsers import JSONParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.http import error_response, no_store
from backend.throttles import PublicCatalogThrottle
from site_content.services.exceptions import SiteContentError
from site_content.services.home import get_home_content, update_home_content

logger = logging.getLogger(__name__)


def _payload(row) -> dict:
    return {
        "key": row.key,
        "json": row.json or {},
        "updatedAt": row.updated_at.isoformat() if row.updated_at else None,
    }


class AdminSiteContentView(APIView):
    parser_classes = [JSONParser]

    @extend_schema(tags=["Admin"], responses={200: OpenApiResponse(description="{key, json, updatedAt}")})
    def get(self, request, *args, **kwargs):
        try:
            row = get_home_content()
        except Exception:
            logger.exception("Failed to load site content")
            return no_store(error_response("Internal server error", status=500))
        return no_store(Response(_payload(row)))

    @extend_schema(
        tags=["Admin"],
        request=OpenApiTypes.OBJECT,
        description="Body: {key: \"home\", json: {...}} or {home: {...}}.",
        responses={
            200: OpenApiResponse(description="{key, json, updatedAt}"),
            400: OpenApiResponse(description="Invalid key/payload or invalid_image_url"),
        },
    )
    def put(self, request, *args, **kwargs):
        try:
            row = update_home_content(request.data)
        except SiteContentError as exc:
            return no_store(error_response(exc.error, status=exc.status_code, detail=exc.detail))
        except Exception:
            logger.exception("Failed to save site content")
            return no_store(error_response("Failed to save site content", status=500))
        return no_store(Response(_payload(row)))


class PublicSiteContentView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(tags=["Public"], responses={200: OpenApiResponse(description="Home content JSON")})
    def get(self, request, *args, **kwargs):
        try:
            row = get_home_content()
        except Exception:
            logger.exception("Failed to load public site content")
            return no_store(error_response("Failed to load site content", status=500))
        return no_store(Response(row.json or {}))
