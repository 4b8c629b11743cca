# categories/models/__init__.py

from .category import Category

__all__ = [
    "Category",
]
