# backend/urls.py
"""
PROJECT URLS

All API routes live under /api/

Storefront (AllowAny, throttled):
- /api/products/, /api/categories/, /api/gallery/
- /api/site-content/, /api/messages/
- /api/checkout/..., /api/webhooks/stripe/

Admin (staff JWT):
- /api/admin/products/, /api/admin/categories/, /api/admin/gallery/
- /api/admin/messages/, /api/admin/custom-orders/, /api/admin/orders/
- /api/admin/site-content/, /api/admin/images/upload/

Operational:
- /api/health/ (AllowAny) checks DB connectivity.
- Django admin path configurable via env var (ADMIN_PATH).
"""

from __future__ import annotations

from django.conf import settings
from django.contrib import admin
from django.db import connections
from django.db.utils import OperationalError
from django.urls import include, path
from django.views.generic import RedirectView
from drf_spectacular.utils import extend_schema
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from categories import urls as category_urls
from inbox import urls as inbox_urls
from products import urls as product_urls
from public import urls as public_urls
from site_content import urls as site_content_urls


# ------------------ API ROOT (PUBLIC) ------------------
@extend_schema(
    tags=["Meta"],
    responses={
        200: {
            "type": "object",
            "properties": {
                "message": {"type": "string"},
                "auth": {"type": "object"},
                "docs": {"type": "object"},
                "modules": {"type": "object"},
            },
        }
    },
)
@api_view(["GET"])
@permission_classes([AllowAny])
def api_root(request):
    return Response(
        {
            "message": f"{settings.BRAND_NAME} API is running",
            "auth": {
                "jwt_create": "/api/auth/jwt/create/",
                "jwt_refresh": "/api/auth/jwt/refresh/",
            },
            "docs": {
                "swagger": "/api/docs/",
                "schema": "/api/schema/",
            },
            "modules": {
                "products": "/api/products/",
                "categories": "/api/categories/",
                "gallery": "/api/gallery/",
                "site_content": "/api/site-content/",
                "messages": "/api/messages/",
                "checkout": "/api/checkout/",
                "admin": "/api/admin/",
            },
        }
    )


# ------------------ HEALTH CHECK (PUBLIC) ------------------
@extend_schema(
    tags=["Meta"],
    responses={
        200: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "db": {"type": "string"},
            },
        },
        503: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "db": {"type": "string"},
                "error": {"type": "string"},
            },
        },
    },
)
@api_view(["GET"])
@permission_classes([AllowAny])
def health_check(request):
    """
    Minimal operational endpoint:
    - Confirms app is responding
    - Confirms DB connection + simple query works
    """
    try:
        conn = connections["default"]
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1;")
            cursor.fetchone()
        return Response({"status": "ok", "db": "ok"})
    except OperationalError as e:
        return Response(
            {"status": "degraded", "db": "down", "error": str(e)}, status=503
        )
    except Exception as e:
        return Response(
            {"status": "degraded", "db": "unknown", "error": str(e)}, status=503
        )


# ------------------ ADMIN PATH (HARDENED) ------------------
# In production, set ADMIN_PATH to something non-obvious. Keep trailing slash.
ADMIN_PATH = getattr(settings, "ADMIN_PATH", "admin/")
if not ADMIN_PATH.endswith("/"):
    ADMIN_PATH = f"{ADMIN_PATH}/"


# ------------------ STAFF API (IsAdminUser) ------------------
staff_urlpatterns = [
    path("messages/", include(inbox_urls.admin_urlpatterns)),
    path("custom-orders/", include("custom_orders.urls")),
    path("orders/", include("orders.urls")),
    path("site-content/", include(site_content_urls.admin_urlpatterns)),
    path("products/", include(product_urls.admin_urlpatterns)),
    path("categories/", include(category_urls.admin_urlpatterns)),
    path("gallery/", include(site_content_urls.admin_gallery_urlpatterns)),
    path("images/", include("uploads.urls")),
]


# ------------------ API ROUTES (ALL UNDER /api/) ------------------
api_urlpatterns = [
    # Health check / root
    path("", api_root, name="api-root"),
    path("health/", health_check, name="health-check"),
    # OpenAPI / Swagger
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    # JWT (SimpleJWT)
    path("auth/jwt/create/", TokenObtainPairView.as_view(), name="jwt-create"),
    path("auth/jwt/refresh/", TokenRefreshView.as_view(), name="jwt-refresh"),
    # Storefront
    path("products/", include("products.urls")),
    path("categories/", include(category_urls.public_urlpatterns)),
    path("gallery/", include(site_content_urls.public_gallery_urlpatterns)),
    path("site-content/", include(site_content_urls.public_urlpatterns)),
    path("messages/", include(inbox_urls.public_urlpatterns)),
    path("checkout/", include(public_urls.checkout_urlpatterns)),
    path("webhooks/", include(public_urls.webhook_urlpatterns)),
    # Staff
    path("admin/", include(staff_urlpatterns)),
]

urlpatterns = [
    # Hardened admin path
    path(ADMIN_PATH, admin.site.urls),
    # Root convenience: visiting / takes you to Swagger docs
    path("", RedirectView.as_view(url="/api/docs/", permanent=False), name="root"),
    path("api/", include(api_urlpatterns)),
]
