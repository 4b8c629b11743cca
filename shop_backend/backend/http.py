# backend/http.py
"""
Small response helpers shared by the JSON endpoints.

Error bodies are always {"error": <short message>, "detail": <optional>}.
"""

from __future__ import annotations

from rest_framework.response import Response

NO_STORE = "no-store, no-cache, must-revalidate, max-age=0"


def no_store(response: Response) -> Response:
    response["Cache-Control"] = NO_STORE
    response["Pragma"] = "no-cache"
    response["Expires"] = "0"
    return response


def error_response(error: str, *, status: int, detail=None, **extra) -> Response:
    body = {"error": error}
    if detail is not None:
        body["detail"] = detail
    body.update(extra)
    return Response(body, status=status)


def first_error(errors) -> str:
    """
    Flatten DRF serializer errors to the first human-readable message.
    """
    if isinstance(errors, dict):
        errors = list(errors.values())
    if isinstance(errors, (list, tuple)):
        for value in errors:
            message = first_error(value)
            if message:
                return message
        return ""
    return str(errors)
