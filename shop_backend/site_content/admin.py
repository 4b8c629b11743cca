# site_content/admin.py

from django.contrib import admin

from site_content.models import GalleryImage, SiteContent


@admin.register(SiteContent)
class SiteContentAdmin(admin.ModelAdmin):
    list_display = ("key", "updated_at")
    readonly_fields = ("updated_at",)


@admin.register(GalleryImage)
class GalleryImageAdmin(admin.ModelAdmin):
    list_display = ("image_url", "alt_text", "position", "is_active", "created_at")
    list_filter = ("is_active",)
    ordering = ("position", "created_at")
