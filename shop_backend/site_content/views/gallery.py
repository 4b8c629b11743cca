# site_content/views/gallery.py

"""
GALLERY

GET /api/gallery/          -> {images} visible tiles only (public)
GET /api/admin/gallery/    -> {images} including hidden tiles
PUT /api/admin/gallery/    {images:[{id?, imageUrl, alt?, title?, hidden?, position?}]}
                           -> {images} (replaces the whole gallery)
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
from site_content.services.gallery import list_gallery_images, replace_gallery_images

logger = logging.getLogger(__name__)


def _image_payload(row) -> dict:
    return {
        "id": row.id,
        "imageUrl": row.image_url,
        "alt": row.alt_text or None,
        "title": row.alt_text or None,
        "hidden": not row.is_active,
        "position": row.position,
        "createdAt": row.created_at.isoformat() if row.created_at else None,
    }


def _gallery_response(*, include_hidden: bool) -> Response:
    try:
        images = [_image_payload(r) for r in list_gallery_images(include_hidden=include_hidden)]
    except Exception:
        logger.exception("Failed to load gallery images")
        return error_response("Failed to load gallery images", status=500)
    return Response({"images": images})


class PublicGalleryView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(tags=["Public"], responses={200: OpenApiResponse(description="{images}")})
    def get(self, request, *args, **kwargs):
        return no_store(_gallery_response(include_hidden=False))


class AdminGalleryView(APIView):
    parser_classes = [JSONParser]

    @extend_schema(tags=["Admin"], responses={200: OpenApiResponse(description="{images}")})
    def get(self, request, *args, **kwargs):
        return no_store(_gallery_response(include_hidden=True))

    @extend_schema(
        tags=["Admin"],
        request=OpenApiTypes.OBJECT,
        responses={
            200: OpenApiResponse(description="{images}"),
            400: OpenApiResponse(description="Invalid JSON / inline image"),
        },
    )
    def put(self, request, *args, **kwargs):
        try:
            rows = replace_gallery_images(request.data)
        except SiteContentError as exc:
            return no_store(error_response(exc.error, status=exc.status_code, detail=exc.detail))
        except Exception:
            logger.exception("Failed to save gallery images")
            return no_store(error_response("Failed to save gallery images", status=500))

        return no_store(Response({"images": [_image_payload(r) for r in rows]}))
