"""Configuration management for hubgallery.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the HUBGALLERY_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (HUBGALLERY_* prefix)
2. .env file in the project root
3. Default values defined in HubGalleryConfig

Example .env file:
    HUBGALLERY_HUB_URL=https://hub.vroid.com
    HUBGALLERY_SESSION_SECRET=change-me
    HUBGALLERY_SERVER_PORT=8000

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
``create_app()`` falls back to it when no explicit instance is passed.

Usage Example
-------------
    from hubgallery.core.config import config

    print(config.hub_url)
    print(config.page_size)

Hub Constraints
---------------
- ``hub_url`` doubles as the base for resolving relative ``_links.next``
  hrefs returned by the hub.
- The hub rejects requests without an ``X-Api-Version`` header.
- ``page_size`` is fixed server-side; clients cannot request other sizes.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HubGalleryConfig(BaseSettings):
    """Main configuration for hubgallery.

    Attributes
    ----------
    Hub Settings:
        hub_url : str
            Base URL of the model hub (requests and link resolution)
        hub_api_version : str
            Value sent in the ``X-Api-Version`` header
        page_size : int
            Items requested per upstream call (1-100)

    Session Settings:
        session_secret : str
            HS256 secret used to verify session JWTs
        session_cookie_name : str
            Name of the cookie that carries the session JWT

    Server Settings:
        server_host : str
            Server bind address
        server_port : int
            Server port (1024-65535)
        cors_origins : list[str]
            Origins allowed by the CORS middleware
        log_level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
            Root log level

    Examples
    --------
        >>> custom_config = HubGalleryConfig(
        ...     hub_url="https://hub.example.test",
        ...     session_secret="secret",
        ... )
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="HUBGALLERY_",
        case_sensitive=False,
    )

    # Hub settings
    hub_url: str = Field(
        default="https://hub.vroid.com",
        description="Base URL of the model hub API",
    )
    hub_api_version: str = Field(
        default="11",
        description="Value of the X-Api-Version header required by the hub",
    )
    page_size: int = Field(
        default=12,
        description="Number of character models requested per page",
        ge=1,
        le=100,
    )

    # Session settings
    session_secret: str = Field(
        default="",
        description="HS256 secret used to verify the session JWT",
    )
    session_cookie_name: str = Field(
        default="next-auth.session-token",
        description="Cookie carrying the session JWT",
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=8000,
        description="Server port",
        ge=1024,
        le=65535,
    )
    cors_origins: list[str] = Field(
        default_factory=list,
        description="Origins allowed to call the API from a browser with credentials",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level",
    )


# Global configuration instance
# Loads values from environment variables (HUBGALLERY_* prefix) and .env file.
config = HubGalleryConfig()
