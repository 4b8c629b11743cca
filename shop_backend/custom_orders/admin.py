# custom_orders/admin.py

from django.contrib import admin

from custom_orders.models import CustomOrder, DisplayIdCounter


@admin.register(CustomOrder)
class CustomOrderAdmin(admin.ModelAdmin):
    list_display = (
        "display_custom_order_id",
        "customer_name",
        "customer_email",
        "amount",
        "status",
        "created_at",
    )
    list_filter = ("status",)
    search_fields = ("display_custom_order_id", "customer_name", "customer_email")
    readonly_fields = (
        "display_custom_order_id",
        "stripe_session_id",
        "stripe_payment_intent_id",
        "paid_at",
        "created_at",
    )

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(DisplayIdCounter)
class DisplayIdCounterAdmin(admin.ModelAdmin):
    list_display = ("year", "counter")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
