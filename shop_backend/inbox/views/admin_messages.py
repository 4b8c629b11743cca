# inbox/views/admin_messages.py

"""
ADMIN INBOX

GET    /api/admin/messages/            newest first (?status=new)
DELETE /api/admin/messages/<uuid>/     -> {success, deletedId}
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import generics
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.http import error_response, no_store
from inbox.models import Message
from inbox.serializers import AdminMessageSerializer

logger = logging.getLogger(__name__)


class AdminMessageListView(generics.ListAPIView):
    serializer_class = AdminMessageSerializer
    pagination_class = None
    filterset_fields = ["status"]

    def get_queryset(self):
        return Message.objects.order_by("-created_at")

    @extend_schema(
        tags=["Admin"],
        parameters=[OpenApiParameter("status", str, OpenApiParameter.QUERY, required=False)],
    )
    def get(self, request, *args, **kwargs):
        return no_store(super().get(request, *args, **kwargs))


class AdminMessageDeleteView(APIView):
    @extend_schema(
        tags=["Admin"],
        responses={
            200: OpenApiResponse(description="{success, deletedId}"),
            404: OpenApiResponse(description="Message not found"),
        },
    )
    def delete(self, request, message_id, *args, **kwargs):
        try:
            deleted, _ = Message.objects.filter(id=message_id).delete()
        except Exception as exc:
            logger.exception("Delete message failed", extra={"message_id": str(message_id)})
            return error_response("Delete message failed", status=500, detail=str(exc))

        if not deleted:
            return error_response("Message not found", status=404)

        logger.info("Message deleted", extra={"message_id": str(message_id)})
        return Response({"success": True, "deletedId": str(message_id)})
