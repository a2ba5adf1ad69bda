"""Core components shared by the API layer.

- **HubGalleryConfig** / **config**: configuration using Pydantic Settings
  (``HUBGALLERY_`` prefixed environment variables).
- **HubClient**: async client for the model hub API.
- **SessionResolver**: maps a request to the hub access token of its session.
"""

from hubgallery.core.config import HubGalleryConfig, config
from hubgallery.core.hub_client import HubClient
from hubgallery.core.session import JWTSessionResolver, SessionResolver

__all__ = [
    "HubGalleryConfig",
    "config",
    "HubClient",
    "JWTSessionResolver",
    "SessionResolver",
]
