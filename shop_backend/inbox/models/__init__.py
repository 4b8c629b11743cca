# inbox/models/__init__.py

from .message import Message

__all__ = [
    "Message",
]
