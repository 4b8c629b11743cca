# custom_orders/urls.py

"""
Mounted under /api/admin/custom-orders/ (staff only).
"""

from django.urls import path

from custom_orders.views import (
    CustomOrderDetailView,
    CustomOrderListCreateView,
    SendPaymentLinkView,
)

urlpatterns = [
    path("", CustomOrderListCreateView.as_view(), name="custom-order-list"),
    path("<uuid:order_id>/", CustomOrderDetailView.as_view(), name="custom-order-detail"),
    path(
        "<uuid:order_id>/send-payment-link/",
        SendPaymentLinkView.as_view(),
        name="custom-order-send-payment-link",
    ),
]
