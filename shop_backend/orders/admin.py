# orders/admin.py

from django.contrib import admin

from orders.models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    can_delete = False
    readonly_fields = ("product", "quantity", "price_cents")


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("id", "customer_email", "total_cents", "created_at")
    search_fields = ("customer_email", "stripe_session_id", "shipping_name")
    readonly_fields = (
        "stripe_session_id",
        "stripe_payment_intent_id",
        "total_cents",
        "shipping_cents",
        "created_at",
    )
    inlines = [OrderItemInline]
