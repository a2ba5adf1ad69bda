"""hubgallery - Character model browsing API backed by a model hub."""

__version__ = "0.1.0"

from hubgallery.core.config import HubGalleryConfig, config

__all__ = [
    "HubGalleryConfig",
    "config",
]
