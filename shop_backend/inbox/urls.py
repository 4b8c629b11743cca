# inbox/urls.py

"""
INBOX URLS

public_urlpatterns -> /api/messages/
admin_urlpatterns  -> /api/admin/messages/
"""

from django.urls import path

from inbox.views import (
    AdminMessageDeleteView,
    AdminMessageListView,
    ContactMessageCreateView,
)

public_urlpatterns = [
    path("", ContactMessageCreateView.as_view(), name="message-create"),
]

admin_urlpatterns = [
    path("", AdminMessageListView.as_view(), name="admin-message-list"),
    path(
        "<uuid:message_id>/",
        AdminMessageDeleteView.as_view(),
        name="admin-message-delete",
    ),
]
