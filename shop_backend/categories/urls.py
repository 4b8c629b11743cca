# categories/urls.py

"""
public_urlpatterns -> /api/categories/
admin_urlpatterns  -> /api/admin/categories/
"""

from django.urls import path

from categories.views import (
    AdminCategoryDetailView,
    AdminCategoryListCreateView,
    PublicCategoryListView,
)

public_urlpatterns = [
    path("", PublicCategoryListView.as_view(), name="category-list"),
]

admin_urlpatterns = [
    path("", AdminCategoryListCreateView.as_view(), name="admin-category-list"),
    path(
        "<str:category_id>/",
        AdminCategoryDetailView.as_view(),
        name="admin-category-detail",
    ),
]
