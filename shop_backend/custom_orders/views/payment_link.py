# custom_orders/views/payment_link.py

"""
POST /api/admin/custom-orders/<uuid>/send-payment-link/
-> {success, paymentLink, sessionId, emailOk}
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.config import MissingConfigurationError
from backend.http import error_response, no_store
from custom_orders.services.exceptions import CustomOrderServiceError
from custom_orders.services.payment_link import send_payment_link
from public.services.exceptions import PaymentServiceError

logger = logging.getLogger(__name__)


class SendPaymentLinkView(APIView):
    @extend_schema(
        tags=["Admin"],
        request=None,
        responses={
            200: OpenApiResponse(description="{success, paymentLink, sessionId, emailOk}"),
            400: OpenApiResponse(description="Amount or email missing"),
            404: OpenApiResponse(description="Not found"),
            500: OpenApiResponse(description="Configuration or provider error"),
        },
    )
    def post(self, request, order_id, *args, **kwargs):
        try:
            result = send_payment_link(order_id=order_id)
        except MissingConfigurationError as exc:
            return no_store(
                error_response(
                    "Failed to send payment link",
                    status=500,
                    detail=f"Missing {', '.join(exc.missing)}",
                    missing=exc.missing,
                )
            )
        except CustomOrderServiceError as exc:
            return no_store(error_response(exc.error, status=exc.status_code, detail=exc.detail))
        except PaymentServiceError as exc:
            return no_store(error_response(exc.error, status=exc.status_code, detail=exc.detail))
        except Exception:
            logger.exception(
                "Send payment link failed", extra={"custom_order_id": str(order_id)}
            )
            return no_store(error_response("Failed to send payment link", status=500))

        return no_store(
            Response(
                {
                    "success": True,
                    "paymentLink": result.payment_link,
                    "sessionId": result.session_id,
                    "emailOk": result.email_ok,
                }
            )
        )
