# public/views/stripe_webhook.py

"""
POST /api/webhooks/stripe/

- Stripe-Signature verified against the raw body before anything is read
- 400 bad signature, 500 missing config / handler failure (Stripe retries),
  200 once the event is applied or deliberately ignored
"""

from __future__ import annotations

import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.parsers import JSONParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.config import MissingConfigurationError
from backend.http import error_response
from backend.throttles import WebhookThrottle
from public.services.exceptions import WebhookSignatureError
from public.services.stripe_gateway import verify_webhook_event
from public.services.webhooks import handle_stripe_event

logger = logging.getLogger(__name__)


class StripeWebhookView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    parser_classes = [JSONParser]
    throttle_classes = [WebhookThrottle]

    @extend_schema(
        tags=["Webhooks"],
        request=OpenApiTypes.OBJECT,
        responses={
            200: OpenApiResponse(description="{received, handled}"),
            400: OpenApiResponse(description="Missing or invalid signature"),
            500: OpenApiResponse(description="Not configured or handler failed"),
        },
    )
    def post(self, request, *args, **kwargs):
        raw_body = request.body or b""
        signature = request.headers.get("Stripe-Signature")

        logger.info("Stripe webhook received")

        try:
            event = verify_webhook_event(payload=raw_body, signature=signature)
        except MissingConfigurationError as exc:
            logger.error("Stripe webhook not configured", extra={"missing": exc.missing})
            return error_response(
                "Stripe is not configured",
                status=500,
                detail=f"Missing {', '.join(exc.missing)}",
                missing=exc.missing,
            )
        except WebhookSignatureError as exc:
            logger.warning("Invalid Stripe webhook signature", extra={"detail": exc.detail})
            return error_response(exc.error, status=exc.status_code)

        try:
            handled = handle_stripe_event(event)
        except Exception:
            logger.exception(
                "Stripe webhook handling failed",
                extra={"event_id": event.get("id"), "type": event.get("type")},
            )
            return error_response("Webhook handling failed", status=500)

        return Response({"received": True, "handled": handled})
