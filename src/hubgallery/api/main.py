"""hubgallery — FastAPI Application.

This module is the single entry point for the web application.  It defines
the application factory, the REST API routes, and the ``main()`` CLI
function that launches the uvicorn server.

Architecture
------------
The application is a stateless proxy in front of the model hub:

- **Configuration** comes from :data:`~hubgallery.core.config.config`
  (``HUBGALLERY_*`` environment variables).
- **Authentication** is delegated to a
  :class:`~hubgallery.core.session.SessionResolver` which maps the caller's
  session cookie to a hub access token.
- **Hub access** goes through a single shared
  :class:`~hubgallery.core.hub_client.HubClient` created in the lifespan.
- **Pagination** reshaping lives in :mod:`hubgallery.api.pagination`.

Nothing is cached or persisted between requests.

Endpoints
---------
========  ==============================  ==================================
Method    Path                            Purpose
========  ==============================  ==================================
GET       ``/api/config``                 Public frontend configuration
GET       ``/api/vroid/models/account``   One page of the account's models
========  ==============================  ==================================

Usage
-----
CLI (installed entry point)::

    hubgallery

Direct invocation::

    python -m hubgallery.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from hubgallery import __version__
from hubgallery.api.errors import (
    UnauthorizedError,
    UpstreamError,
    UpstreamUnavailableError,
    register_exception_handlers,
)
from hubgallery.api.models import AccountModelsPage, ErrorResponse
from hubgallery.api.pagination import normalize_page
from hubgallery.core.config import HubGalleryConfig, config
from hubgallery.core.hub_client import HubClient, get_hub_client
from hubgallery.core.session import JWTSessionResolver, SessionResolver, get_session_resolver

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging for the server process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


async def get_config(request: Request) -> dict:
    """Return the public configuration the frontend needs.

    Returns:
        Dictionary with keys ``version``, ``hub_url`` and ``page_size``.
    """
    cfg: HubGalleryConfig = request.app.state.config
    return {
        "version": __version__,
        "hub_url": cfg.hub_url,
        "page_size": cfg.page_size,
    }


async def get_account_models(
    request: Request,
    max_id: str | None = None,
    hub_client: HubClient = Depends(get_hub_client),
    session_resolver: SessionResolver = Depends(get_session_resolver),
) -> AccountModelsPage:
    """Return one page of the signed-in account's character models.

    This endpoint:

    1. Resolves the hub access token from the caller's session.
    2. Fetches exactly one page from the hub, forwarding the ``max_id``
       cursor and the fixed page size.
    3. Passes any non-200 hub status straight through.
    4. Extracts the next cursor from ``_links.next.href``.

    Args:
        max_id: Opaque cursor from a previous response; omit for the first
            page.

    Returns:
        The page as ``{"maxId": ..., "data": [...]}``.

    Raises:
        UnauthorizedError: 401 when no access token can be resolved.
        UpstreamError: The hub's status when it is not 200.
        UpstreamUnavailableError: 502 when the hub is unreachable or its
            body cannot be decoded.
    """
    token = session_resolver.resolve_token(request)
    if not token:
        raise UnauthorizedError()

    cfg: HubGalleryConfig = request.app.state.config
    try:
        hub_res = await hub_client.get_account_character_models(
            token, max_id=max_id, count=cfg.page_size
        )
    except httpx.RequestError as e:
        raise UpstreamUnavailableError(f"Hub API is unreachable: {e.__class__.__name__}") from e

    if hub_res.status_code != 200:
        logger.warning(f"Hub responded with status {hub_res.status_code} for account models")
        raise UpstreamError(hub_res.status_code)

    try:
        body = hub_res.json()
    except ValueError as e:
        raise UpstreamUnavailableError("Hub API returned an invalid JSON body") from e
    if not isinstance(body, dict):
        raise UpstreamUnavailableError("Hub API returned an unexpected body")

    page = normalize_page(body, hub_client.base_url)
    logger.debug(f"Returning {len(page.data)} models, next cursor present: {page.max_id is not None}")
    return page


# ---------------------------------------------------------------------------
# Application factory.
# ---------------------------------------------------------------------------


def create_app(
    cfg: HubGalleryConfig | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    session_resolver: SessionResolver | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        cfg: Configuration to use.  Defaults to the global instance.
        transport: Optional httpx transport for the hub client (tests inject
            a mock transport here).
        session_resolver: Optional resolver replacing the default
            :class:`JWTSessionResolver`.

    Returns:
        The configured application.
    """
    cfg = cfg or config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Create the shared hub client on startup and close it on shutdown."""
        app.state.hub_client = HubClient(cfg.hub_url, cfg.hub_api_version, transport=transport)
        logger.info(f"Hub client initialised for {cfg.hub_url}.")

        yield  # Application runs here.

        await app.state.hub_client.close()
        logger.info("Hub client closed on shutdown.")

    app = FastAPI(
        title="hubgallery",
        description="Character model browsing API backed by the model hub.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = cfg
    app.state.session_resolver = session_resolver or JWTSessionResolver(
        cfg.session_secret, cfg.session_cookie_name
    )

    # Credentials are required for the session cookie to reach the API when
    # the frontend is served from another origin.  A wildcard origin never
    # gets credentials.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials="*" not in cfg.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.add_api_route("/api/config", get_config, methods=["GET"])
    app.add_api_route(
        "/api/vroid/models/account",
        get_account_models,
        methods=["GET"],
        response_model=AccountModelsPage,
        responses={
            401: {"model": ErrorResponse},
            502: {"model": ErrorResponse},
        },
    )
    return app


app = create_app()


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host, port and log level from :data:`~hubgallery.core.config.config`
    (``HUBGALLERY_SERVER_HOST``, ``HUBGALLERY_SERVER_PORT`` and
    ``HUBGALLERY_LOG_LEVEL``).  Defaults to ``0.0.0.0:8000``.

    This function is registered as the ``hubgallery`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    configure_logging(config.log_level)
    uvicorn.run(
        "hubgallery.api.main:app",
        host=config.server_host,
        port=config.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
