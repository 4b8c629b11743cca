# inbox/views/__init__.py

from .admin_messages import AdminMessageDeleteView, AdminMessageListView
from .contact import ContactMessageCreateView

__all__ = [
    "AdminMessageDeleteView",
    "AdminMessageListView",
    "ContactMessageCreateView",
]
