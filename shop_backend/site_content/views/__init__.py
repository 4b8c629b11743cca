# site_content/views/__init__.py

from .gallery import AdminGalleryView, PublicGalleryView
from .site_content import AdminSiteContentView, PublicSiteContentView

__all__ = [
    "AdminGalleryView",
    "AdminSiteContentView",
    "PublicGalleryView",
    "PublicSiteContentView",
]
