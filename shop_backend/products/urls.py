# products/urls.py

"""
PRODUCTS URLS

urlpatterns       -> /api/products/ (public, read-only)
admin_urlpatterns -> /api/admin/products/
"""

from django.urls import path

from products.views import (
    AdminProductDetailView,
    AdminProductListCreateView,
    PublicProductDetailView,
    PublicProductListView,
)

urlpatterns = [
    path("", PublicProductListView.as_view(), name="product-list"),
    path("<str:product_id>/", PublicProductDetailView.as_view(), name="product-detail"),
]

admin_urlpatterns = [
    path("", AdminProductListCreateView.as_view(), name="admin-product-list"),
    path(
        "<str:product_id>/",
        AdminProductDetailView.as_view(),
        name="admin-product-detail",
    ),
]
