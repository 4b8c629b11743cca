# inbox/views/contact.py

"""
PUBLIC CONTACT FORM

POST /api/messages/  {name, email, message, imageUrl?} -> {success, id, createdAt}
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.parsers import JSONParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.http import error_response, first_error
from backend.throttles import PublicWriteThrottle
from inbox.models import Message
from inbox.serializers import MessageCreateSerializer

logger = logging.getLogger(__name__)


class ContactMessageCreateView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    parser_classes = [JSONParser]
    throttle_classes = [PublicWriteThrottle]

    @extend_schema(
        tags=["Public"],
        request=MessageCreateSerializer,
        responses={
            200: OpenApiResponse(description="{success, id, createdAt}"),
            400: OpenApiResponse(description="Missing name/email/message"),
        },
    )
    def post(self, request, *args, **kwargs):
        s = MessageCreateSerializer(data=request.data)
        if not s.is_valid():
            return error_response(first_error(s.errors), status=400)

        try:
            msg = Message.objects.create(**s.validated_data)
        except Exception:
            logger.exception("Failed to save contact message")
            return error_response("Failed to save message", status=500)

        logger.info("Contact message received", extra={"message_id": str(msg.id)})
        return Response(
            {"success": True, "id": str(msg.id), "createdAt": msg.created_at.isoformat()}
        )
