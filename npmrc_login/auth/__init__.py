"""Registry authentication for npmrc-login."""

from .registry import authenticate, build_user_url, mask_token, registry_host
from .types import AuthResponse, Credentials

__all__ = [
    "authenticate",
    "build_user_url",
    "mask_token",
    "registry_host",
    "AuthResponse",
    "Credentials",
]
