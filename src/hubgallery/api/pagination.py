"""Cursor pagination helpers for hub collection responses.

This module isolates the response-reshaping logic from
``hubgallery.api.main`` so route handlers can focus on HTTP concerns while
the cursor handling remains testable as a small unit.

The hub paginates collections with a HATEOAS-style link rather than a bare
cursor::

    {
      "_links": {"next": {"href": "/api/account/character_models?max_id=123&count=12"}},
      "data": [...]
    }

The ``href`` may be absolute or host-relative, so it is resolved against the
hub base URL before its ``max_id`` query parameter is read.  Clients only
ever see the extracted cursor, which they echo back as ``max_id`` on the
next request.
"""

from __future__ import annotations

from typing import Any

import httpx

from hubgallery.api.models import AccountModelsPage

CURSOR_PARAM = "max_id"


def extract_next_cursor(links: Any, base_url: str) -> str | None:
    """Return the cursor embedded in a ``_links`` object's ``next`` href.

    Anything that does not look like a next link (missing ``_links``,
    missing ``next``, missing or non-string ``href``) means there is no
    next page.

    Args:
        links: The ``_links`` value from a hub response body.
        base_url: Base URL used to resolve host-relative hrefs.

    Returns:
        The ``max_id`` query parameter of the next link, or ``None``.
    """
    if not isinstance(links, dict):
        return None

    next_link = links.get("next")
    if not isinstance(next_link, dict):
        return None

    href = next_link.get("href")
    if not isinstance(href, str) or not href:
        return None

    next_url = httpx.URL(base_url).join(href)
    return next_url.params.get(CURSOR_PARAM)


def normalize_page(body: dict[str, Any], base_url: str) -> AccountModelsPage:
    """Reshape a decoded hub collection body into the client envelope.

    Items are passed through in their original order without inspection.
    A missing or non-list ``data`` field is treated as an empty page.

    Args:
        body: Decoded JSON object returned by the hub.
        base_url: Base URL used to resolve the next link.

    Returns:
        The normalised page.
    """
    items = body.get("data")
    if not isinstance(items, list):
        items = []

    return AccountModelsPage(
        max_id=extract_next_cursor(body.get("_links"), base_url),
        data=items,
    )
