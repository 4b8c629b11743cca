# uploads/views.py

"""
POST /api/admin/images/upload/   multipart: file (or files[]), scope
-> {id, key, url, scope, contentType, size}
"""

from __future__ import annotations

import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.exceptions import ParseError
from rest_framework.parsers import MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.http import error_response, no_store
from uploads.services.exceptions import UploadError
from uploads.services.images import (
    check_declared_length,
    missing_upload_settings,
    normalize_scope,
    pick_file,
    store_image,
)

logger = logging.getLogger(__name__)


class ImageUploadView(APIView):
    parser_classes = [MultiPartParser]

    @extend_schema(
        tags=["Admin"],
        request={"multipart/form-data": OpenApiTypes.OBJECT},
        responses={
            200: OpenApiResponse(description="{id, key, url, scope, contentType, size}"),
            400: OpenApiResponse(description="Not multipart or malformed, missing file, bad scope"),
            413: OpenApiResponse(description="Larger than 8 MiB"),
            415: OpenApiResponse(description="Not JPEG/PNG/WEBP"),
            500: OpenApiResponse(description="Storage not configured or write failed"),
        },
    )
    def post(self, request, *args, **kwargs):
        content_type = request.META.get("CONTENT_TYPE", "")
        content_length = request.META.get("CONTENT_LENGTH", "")
        logger.info(
            "Image upload request",
            extra={"content_type": content_type, "content_length": content_length},
        )

        missing = missing_upload_settings()
        if missing:
            return no_store(
                error_response(
                    "Image storage is not configured",
                    status=500,
                    detail=f"Missing {', '.join(missing)}",
                    missing=missing,
                )
            )

        if "multipart/form-data" not in content_type.lower():
            return no_store(error_response("Expected multipart/form-data upload", status=400))

        try:
            # before request.data: the body must not be parsed when oversize
            check_declared_length(content_length)
            upload = pick_file(request.FILES)
            scope = normalize_scope(request.data.get("scope"))
            stored = store_image(upload, scope=scope)
        except UploadError as exc:
            return no_store(error_response(exc.error, status=exc.status_code, detail=exc.detail))
        except ParseError as exc:
            logger.warning("Malformed multipart body", extra={"detail": str(exc.detail)})
            return no_store(error_response("Invalid multipart body", status=400))
        except Exception:
            logger.exception("Image upload failed")
            return no_store(error_response("Image upload failed", status=500))

        return no_store(Response(stored.as_payload()))
