# site_content/models/__init__.py

from .gallery_image import GalleryImage
from .site_content import SiteContent

__all__ = [
    "GalleryImage",
    "SiteContent",
]
