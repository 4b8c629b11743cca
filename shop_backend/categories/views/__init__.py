# categories/views/__init__.py

from .categories import (
    AdminCategoryDetailView,
    AdminCategoryListCreateView,
    PublicCategoryListView,
)

__all__ = [
    "AdminCategoryDetailView",
    "AdminCategoryListCreateView",
    "PublicCategoryListView",
]
