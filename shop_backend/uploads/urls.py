# uploads/urls.py

"""
Mounted under /api/admin/images/ (staff only).
"""

from django.urls import path

from uploads.views import ImageUploadView

urlpatterns = [
    path("upload/", ImageUploadView.as_view(), name="admin-image-upload"),
]
