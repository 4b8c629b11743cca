# categories/admin.py

from django.contrib import admin

from categories.models import Category


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "show_on_homepage", "created_at")
    list_filter = ("show_on_homepage",)
    search_fields = ("name", "slug")
    readonly_fields = ("id", "created_at")
