# orders/models/__init__.py

from .order import Order
from .order_counter import OrderCounter
from .order_item import OrderItem

__all__ = [
    "Order",
    "OrderCounter",
    "OrderItem",
]
