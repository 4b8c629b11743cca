# orders/urls.py

from django.urls import path

from orders.views import AdminOrderListView

urlpatterns = [
    path("", AdminOrderListView.as_view(), name="admin-orders"),
]
