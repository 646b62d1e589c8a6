"""npmrc-login - log in to an npm registry and store the token in .npmrc."""

from importlib.metadata import PackageNotFoundError, version

from .auth import AuthResponse, Credentials, authenticate
from .exceptions import (
    AuthError,
    InvalidRegistryError,
    NpmrcError,
    NpmrcLoginError,
    ResponseError,
    TransportError,
)
from .flow import LoginOptions, LoginResult, login
from .npmrc import update_npmrc

__all__ = [
    "authenticate",
    "login",
    "update_npmrc",
    "AuthResponse",
    "Credentials",
    "LoginOptions",
    "LoginResult",
    "NpmrcLoginError",
    "AuthError",
    "InvalidRegistryError",
    "NpmrcError",
    "ResponseError",
    "TransportError",
]

try:
    __version__ = version("npmrc-login")
except PackageNotFoundError:
    __version__ = "0.1.0"
