# site_content/urls.py

"""
public_urlpatterns         -> /api/site-content/
admin_urlpatterns          -> /api/admin/site-content/
public_gallery_urlpatterns -> /api/gallery/
admin_gallery_urlpatterns  -> /api/admin/gallery/
"""

from django.urls import path

from site_content.views import (
    AdminGalleryView,
    AdminSiteContentView,
    PublicGalleryView,
    PublicSiteContentView,
)

public_urlpatterns = [
    path("", PublicSiteContentView.as_view(), name="site-content"),
]

admin_urlpatterns = [
    path("", AdminSiteContentView.as_view(), name="admin-site-content"),
]

public_gallery_urlpatterns = [
    path("", PublicGalleryView.as_view(), name="gallery"),
]

admin_gallery_urlpatterns = [
    path("", AdminGalleryView.as_view(), name="admin-gallery"),
]
