"""Custom exceptions raised by npmrc-login."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional


class NpmrcLoginError(Exception):
    """Base exception for all npmrc-login failures."""


class InvalidRegistryError(NpmrcLoginError):
    """Raised when the registry URL has no host to key the token by."""


class TransportError(NpmrcLoginError):
    """Raised when the login request could not be sent or answered."""


class ResponseError(NpmrcLoginError):
    """Raised when the registry response body is not a JSON object."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthError(NpmrcLoginError):
    """Raised when the registry did not confirm the login or issued no token."""

    def __init__(self, message: str, ok: Any = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.ok = ok
        self.status_code = status_code


class NpmrcError(NpmrcLoginError):
    """Raised when the .npmrc file cannot be read or written."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:  # pragma: no cover - repr helper
        return f"{self.message} ({self.path})"
