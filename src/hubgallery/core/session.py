"""Session token resolution.

Maps an inbound request to the hub access token of the signed-in user, or
``None`` when no usable session exists.

The default :class:`JWTSessionResolver` reads a NextAuth-style session
cookie.  The cookie value is an HS256 JWT signed with the shared session
secret whose ``accessToken`` claim holds the hub OAuth access token.  An
``Authorization: Bearer`` header is accepted as a fallback so that
non-browser clients can call the API directly.

Resolution never raises: a missing cookie, bad signature, expired session,
or missing claim all yield ``None`` and the caller decides what to do.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import jwt
from fastapi import Request

logger = logging.getLogger(__name__)

ACCESS_TOKEN_CLAIM = "accessToken"
SECURE_COOKIE_PREFIX = "__Secure-"


class SessionResolver(ABC):
    """Base class for session resolvers.

    Subclasses implement :meth:`resolve_token`.
    """

    @abstractmethod
    def resolve_token(self, request: Request) -> str | None:
        """Return the hub access token for *request*, or ``None``."""
        pass


class JWTSessionResolver(SessionResolver):
    """Resolve the access token from a signed session JWT.

    Args:
        secret: HS256 secret the session JWT is signed with.
        cookie_name: Name of the session cookie.  The ``__Secure-`` prefixed
            variant set by browsers over HTTPS is checked as well.
    """

    def __init__(self, secret: str, cookie_name: str = "next-auth.session-token"):
        self._secret = secret
        self._cookie_names = (cookie_name, SECURE_COOKIE_PREFIX + cookie_name)

    def resolve_token(self, request: Request) -> str | None:
        session_jwt = self._session_cookie(request)
        if session_jwt is not None:
            return self._decode_access_token(session_jwt)
        return _bearer_token(request)

    def _session_cookie(self, request: Request) -> str | None:
        for name in self._cookie_names:
            value = request.cookies.get(name)
            if value:
                return value
        return None

    def _decode_access_token(self, session_jwt: str) -> str | None:
        if not self._secret:
            logger.warning("Session cookie present but no session secret is configured")
            return None

        try:
            claims = jwt.decode(session_jwt, key=self._secret, algorithms=["HS256"])
        except jwt.ExpiredSignatureError:
            logger.info("Session token has expired")
            return None
        except jwt.InvalidTokenError as e:
            logger.warning(f"Invalid session token: {e}")
            return None

        access_token = claims.get(ACCESS_TOKEN_CLAIM)
        if not isinstance(access_token, str) or not access_token:
            logger.debug("Session has no access token claim")
            return None
        return access_token


def _bearer_token(request: Request) -> str | None:
    """Return the token from an ``Authorization: Bearer`` header, if any."""
    header = request.headers.get("authorization", "")
    scheme, _, credentials = header.partition(" ")
    if scheme.lower() != "bearer":
        return None
    credentials = credentials.strip()
    return credentials or None


def get_session_resolver(request: Request) -> SessionResolver:
    """FastAPI dependency returning the resolver installed on the app."""
    return request.app.state.session_resolver
