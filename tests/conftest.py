"""Shared pytest fixtures for hubgallery tests."""

import time
from typing import Generator

import httpx
import jwt
import pytest
import respx
from fastapi import FastAPI
from fastapi.testclient import TestClient

from hubgallery.api.main import create_app
from hubgallery.core.config import HubGalleryConfig

HUB_URL = "https://hub.example.test"
SESSION_SECRET = "test-session-secret"
ACCESS_TOKEN = "hub-access-token"


@pytest.fixture
def test_config() -> HubGalleryConfig:
    """Create a test configuration pointing at a fake hub.

    Returns:
        HubGalleryConfig instance for testing
    """
    return HubGalleryConfig(
        hub_url=HUB_URL,
        hub_api_version="11",
        page_size=12,
        session_secret=SESSION_SECRET,
        _env_file=None,
    )


@pytest.fixture
def make_session_cookie():
    """Factory minting signed session JWTs.

    Returns:
        Callable ``(access_token=ACCESS_TOKEN, secret=SESSION_SECRET, **claims) -> str``
    """

    def _make(access_token: str | None = ACCESS_TOKEN, secret: str = SESSION_SECRET, **claims) -> str:
        payload = {"sub": "user-1", "exp": int(time.time()) + 3600, **claims}
        if access_token is not None:
            payload["accessToken"] = access_token
        return jwt.encode(payload, secret, algorithm="HS256")

    return _make


@pytest.fixture
def sample_models() -> list[dict]:
    """A page of character models in hub order.

    Returns:
        List of hub character model objects
    """
    return [
        {
            "id": "8871289385212718212",
            "name": "Alicia",
            "is_private": False,
            "latest_character_model_version": {"original_file_size": 10485760},
        },
        {
            "id": "3126617493019853104",
            "name": "Bruno",
            "is_private": True,
            "latest_character_model_version": {"original_file_size": 2097152},
        },
        {
            "id": "1032284719282733120",
            "name": "Chiyo",
            "is_private": False,
            "latest_character_model_version": None,
        },
    ]


@pytest.fixture
def hub_router(sample_models) -> respx.Router:
    """respx router standing in for the hub API.

    The ``account_models`` route answers with a single page of
    ``sample_models`` that links to a next page.

    Returns:
        respx.Router with the account models route registered
    """
    router = respx.Router(base_url=HUB_URL, assert_all_called=False)
    router.get("/api/account/character_models", name="account_models").mock(
        return_value=httpx.Response(
            200,
            json={
                "_links": {"next": {"href": "/api/account/character_models?max_id=ABC123&count=12"}},
                "data": sample_models,
            },
        )
    )
    return router


@pytest.fixture
def test_app(test_config: HubGalleryConfig, hub_router: respx.Router) -> FastAPI:
    """Create an application whose hub client talks to ``hub_router``.

    Returns:
        FastAPI application for testing
    """
    return create_app(test_config, transport=httpx.MockTransport(hub_router.handler))


@pytest.fixture
def test_client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    """TestClient with the application lifespan running.

    Yields:
        TestClient bound to ``test_app``
    """
    with TestClient(test_app) as client:
        yield client


@pytest.fixture
def authed_client(test_client: TestClient, make_session_cookie) -> TestClient:
    """TestClient carrying a valid session cookie.

    Returns:
        TestClient with ``next-auth.session-token`` set
    """
    test_client.cookies.set("next-auth.session-token", make_session_cookie())
    return test_client
