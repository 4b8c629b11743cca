# custom_orders/views/__init__.py

from .custom_orders import CustomOrderDetailView, CustomOrderListCreateView
from .payment_link import SendPaymentLinkView

__all__ = [
    "CustomOrderDetailView",
    "CustomOrderListCreateView",
    "SendPaymentLinkView",
]
