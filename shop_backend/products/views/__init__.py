# products/views/__init__.py

from .admin_product import AdminProductDetailView, AdminProductListCreateView
from .product import PublicProductDetailView, PublicProductListView

__all__ = [
    "AdminProductDetailView",
    "AdminProductListCreateView",
    "PublicProductDetailView",
    "PublicProductListView",
]
