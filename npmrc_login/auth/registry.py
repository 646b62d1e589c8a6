"""Registry login: exchange a username and password for an auth token.

Implements the npm registry "adduser" call: PUT the credentials to the
CouchDB-style user document and read ``ok`` and ``token`` from the reply.
Functions raise typed errors and never print (callers handle presentation).
"""

from __future__ import annotations

import logging
from urllib.parse import quote, urlparse

import httpx

from .._http import build_headers, handle_response
from ..config import DEFAULT_TIMEOUT_SECONDS, sanitize_registry_url
from ..exceptions import AuthError, InvalidRegistryError, TransportError
from .constants import (
    ERROR_LOGIN_FAILED,
    ERROR_NO_HOST,
    ERROR_TOKEN_MISSING,
    USER_ENDPOINT,
    USERNAME_SAFE_CHARS,
)
from .types import AuthResponse, Credentials

logger = logging.getLogger(__name__)


def build_user_url(registry: str, username: str) -> str:
    """Build the login URL ``<registry>/-/user/org.couchdb.user:<username>``."""
    return f"{sanitize_registry_url(registry)}{USER_ENDPOINT}{quote(username, safe=USERNAME_SAFE_CHARS)}"


def registry_host(registry: str) -> str:
    """Return ``host[:port]`` of the registry URL, scheme and path stripped."""
    try:
        parsed = urlparse(registry)
        # Accessing .port validates it and raises ValueError on garbage.
        _ = parsed.port
    except ValueError as e:
        raise InvalidRegistryError(f"Error parsing registry URL: {e}") from e

    host = parsed.netloc.rpartition("@")[2]
    if not host:
        raise InvalidRegistryError(f"{ERROR_NO_HOST}: {registry!r}")
    return host


def mask_token(token: str) -> str:
    if len(token) >= 16:
        return token[:4] + "..." + token[-4:]
    if len(token) >= 8:
        return token[:4] + "..."
    return "***"


def _send(client: httpx.Client, url: str, credentials: Credentials) -> httpx.Response:
    try:
        return client.put(url, headers=build_headers(), json=credentials.to_payload())
    except (UnicodeEncodeError, TypeError) as e:
        raise TransportError(f"Error encoding JSON: {e}") from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise TransportError(f"Error sending request: {e}") from e


def authenticate(
    registry: str,
    credentials: Credentials,
    *,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    client: httpx.Client | None = None,
) -> str:
    """Log in to the registry and return the issued auth token.

    The response must carry ``"ok": "true"`` as a string; a JSON boolean
    ``true`` counts as a failed login.

    Raises:
        TransportError: If the request could not be sent.
        ResponseError: If the body is not a JSON object.
        AuthError: If the login was not confirmed or no token was issued.
    """
    try:
        url = build_user_url(registry, credentials.username)
    except UnicodeEncodeError as e:
        raise TransportError(f"Error creating request: {e}") from e
    logger.debug("PUT %s", url)

    if client is None:
        with httpx.Client(timeout=timeout) as owned:
            response = _send(owned, url, credentials)
    else:
        response = _send(client, url, credentials)

    logger.debug("Registry answered %s", response.status_code)
    payload = handle_response(response)
    result = AuthResponse.from_payload(payload)

    if not result.succeeded:
        raise AuthError(ERROR_LOGIN_FAILED, ok=payload.get("ok"), status_code=response.status_code)

    if result.token is None:
        raise AuthError(ERROR_TOKEN_MISSING, ok=result.ok, status_code=response.status_code)

    logger.debug("Received token %s", mask_token(result.token))
    return result.token
