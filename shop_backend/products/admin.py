# products/admin.py
"""
PATH: products/admin.py

Catalog is maintained through Django admin. Sold state and stock are
normally driven by the payment webhook; admins may correct them here.
"""

from django.contrib import admin

from products.models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "category",
        "price_cents",
        "quantity_available",
        "is_one_off",
        "is_sold",
        "is_active",
        "created_at",
    )
    list_filter = ("is_active", "is_sold", "is_one_off", "category")
    search_fields = ("name", "slug", "stripe_product_id")
    prepopulated_fields = {"slug": ("name",)}
    ordering = ("-created_at",)
    readonly_fields = ("id", "created_at")
