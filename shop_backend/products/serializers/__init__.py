# products/serializers/__init__.py

from .admin_product import AdminProductSerializer, ProductWriteSerializer
from .product import PublicProductSerializer

__all__ = [
    "AdminProductSerializer",
    "ProductWriteSerializer",
    "PublicProductSerializer",
]
