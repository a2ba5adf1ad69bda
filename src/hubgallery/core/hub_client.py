"""Async HTTP client for the model hub API."""

from __future__ import annotations

import logging

import httpx
from fastapi import Request

logger = logging.getLogger(__name__)

ACCOUNT_CHARACTER_MODELS_PATH = "/api/account/character_models"


class HubClient:
    """Thin wrapper around :class:`httpx.AsyncClient` for hub endpoints.

    Responses are returned as-is; callers decide how to treat non-success
    statuses.  Transport errors (``httpx.RequestError``) propagate.

    Args:
        base_url: Hub base URL, e.g. ``https://hub.vroid.com``.
        api_version: Value sent in the ``X-Api-Version`` header.
        client: Optional pre-built client.  When omitted, an owned client is
            created (with *transport*, if given) and closed by :meth:`close`.
        transport: Optional httpx transport for the owned client.
    """

    def __init__(
        self,
        base_url: str,
        api_version: str,
        *,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self._api_version = api_version
        self._client = client or httpx.AsyncClient(base_url=base_url, transport=transport)
        self._owns_client = client is None

    def _headers(self, token: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {token}",
            "X-Api-Version": self._api_version,
            "Accept": "application/json",
        }

    async def get_account_character_models(
        self,
        token: str,
        *,
        max_id: str | None = None,
        count: int = 12,
    ) -> httpx.Response:
        """Fetch one page of the signed-in account's character models.

        Args:
            token: Hub OAuth access token.
            max_id: Cursor of the page to fetch; omitted for the first page.
            count: Number of models to request.

        Returns:
            The raw hub response.
        """
        params: dict[str, str | int] = {"count": count}
        if max_id:
            params["max_id"] = max_id

        logger.debug(f"GET {ACCOUNT_CHARACTER_MODELS_PATH} params={params}")
        try:
            response = await self._client.get(
                ACCOUNT_CHARACTER_MODELS_PATH,
                params=params,
                headers=self._headers(token),
            )
        except httpx.RequestError as e:
            logger.error(f"Request error for GET {ACCOUNT_CHARACTER_MODELS_PATH}: {e}")
            raise
        logger.debug(f"Response from {ACCOUNT_CHARACTER_MODELS_PATH}: {response.status_code}")
        return response

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()
            logger.debug("Owned httpx.AsyncClient closed.")


def get_hub_client(request: Request) -> HubClient:
    """FastAPI dependency returning the client created in the app lifespan."""
    return request.app.state.hub_client
