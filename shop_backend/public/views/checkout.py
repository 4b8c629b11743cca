# public/views/checkout.py

"""
STOREFRONT CHECKOUT

POST /api/checkout/create-session/     {items:[{productId, quantity}]} -> {clientSecret, sessionId}
GET  /api/checkout/session/<id>/       return-page summary of a session

Rules:
- AllowAny (the storefront is anonymous), throttled
- catalog validation happens before Stripe is called
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.parsers import JSONParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.config import MissingConfigurationError
from backend.http import error_response, first_error, no_store
from backend.throttles import PublicCatalogThrottle, PublicWriteThrottle
from public.serializers import CheckoutSessionCreateSerializer
from public.services.checkout import checkout_session_summary, create_cart_checkout_session
from public.services.exceptions import PaymentServiceError

logger = logging.getLogger(__name__)


def _config_error(error: str, exc: MissingConfigurationError) -> Response:
    logger.error("Checkout configuration missing", extra={"missing": exc.missing})
    return error_response(
        error, status=500, detail=f"Missing {', '.join(exc.missing)}", missing=exc.missing
    )


class CheckoutSessionCreateView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    parser_classes = [JSONParser]
    throttle_classes = [PublicWriteThrottle]

    @extend_schema(
        tags=["Public"],
        request=CheckoutSessionCreateSerializer,
        responses={
            200: OpenApiResponse(description="{clientSecret, sessionId}"),
            400: OpenApiResponse(description="Invalid cart / product unavailable"),
            404: OpenApiResponse(description="Unknown product"),
            500: OpenApiResponse(description="Stripe not configured or provider error"),
        },
    )
    def post(self, request, *args, **kwargs):
        s = CheckoutSessionCreateSerializer(data=request.data)
        if not s.is_valid():
            return error_response(first_error(s.errors) or "Invalid checkout request", status=400)

        try:
            payload = create_cart_checkout_session(s.to_service_items())
        except MissingConfigurationError as exc:
            return _config_error("Stripe is not configured", exc)
        except PaymentServiceError as exc:
            if exc.status_code >= 500:
                logger.error("Checkout session failed", extra={"error": exc.error, "detail": exc.detail})
            return error_response(exc.error, status=exc.status_code, detail=exc.detail)
        except Exception:
            logger.exception("Checkout session create failed")
            return error_response("Failed to create checkout session", status=500)

        return no_store(Response(payload))


class CheckoutSessionDetailView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(
        tags=["Public"],
        responses={
            200: OpenApiResponse(
                description="{id, amountTotal, currency, customerEmail, shipping, lineItems, cardLast4}"
            ),
            500: OpenApiResponse(description="Stripe not configured or lookup failed"),
        },
    )
    def get(self, request, session_id, *args, **kwargs):
        try:
            summary = checkout_session_summary(session_id)
        except MissingConfigurationError as exc:
            return _config_error("Stripe is not configured", exc)
        except PaymentServiceError as exc:
            return error_response(exc.error, status=exc.status_code, detail=exc.detail)
        except Exception:
            logger.exception("Checkout session lookup failed", extra={"session_id": session_id})
            return error_response("Failed to fetch checkout session", status=500)

        return no_store(Response(summary))
