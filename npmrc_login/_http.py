"""Shared HTTP request utilities for registry calls."""

from __future__ import annotations

from typing import Any

import httpx

from .exceptions import ResponseError


def build_headers() -> dict[str, str]:
    """Build request headers for a JSON registry call."""
    return {"Content-Type": "application/json", "Accept": "application/json"}


def handle_response(response: httpx.Response) -> dict[str, Any]:
    """Decode a registry response body into a JSON object.

    The status code is not checked here: a registry that rejects a login
    still answers with a JSON body, and the caller decides from its fields.
    """
    try:
        data = response.json()
    except ValueError as e:
        raise ResponseError(
            f"Error parsing response JSON: {e}",
            status_code=response.status_code,
        ) from e

    if not isinstance(data, dict):
        raise ResponseError(
            f"Error parsing response JSON: expected an object, got {type(data).__name__}",
            status_code=response.status_code,
        )
    return data
