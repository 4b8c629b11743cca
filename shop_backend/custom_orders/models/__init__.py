# custom_orders/models/__init__.py

from .counter import DisplayIdCounter
from .custom_order import CustomOrder

__all__ = [
    "CustomOrder",
    "DisplayIdCounter",
]
