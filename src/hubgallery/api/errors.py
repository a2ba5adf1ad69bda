"""API error types and their JSON rendering.

Every error the API raises deliberately derives from :class:`HubGalleryError`
and is rendered as ``{"message": ...}`` with the error's status code, except
for 1xx, 204 and 304 responses, which are sent without a body.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response


class HubGalleryError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class UnauthorizedError(HubGalleryError):
    """No access token could be resolved from the caller's session."""

    status_code = 401

    def __init__(self, message: str = "Failed to get access token!"):
        super().__init__(message)


class UpstreamError(HubGalleryError):
    """The hub answered with a non-success status; the status is passed through."""

    def __init__(self, status_code: int):
        super().__init__(f"Hub API request failed with status {status_code}", status_code)


class UpstreamUnavailableError(HubGalleryError):
    """The hub could not be reached or returned an undecodable body."""

    status_code = 502


async def _handle_hub_gallery_error(request: Request, exc: HubGalleryError) -> Response:
    # These statuses must not carry a body.
    if exc.status_code < 200 or exc.status_code in (204, 304):
        return Response(status_code=exc.status_code)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON renderer for :class:`HubGalleryError` on *app*."""
    app.add_exception_handler(HubGalleryError, _handle_hub_gallery_error)
