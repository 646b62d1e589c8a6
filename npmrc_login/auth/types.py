"""Typed values exchanged with the registry login endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Credentials:
    """Username and password sent to the registry."""

    username: str
    password: str

    def to_payload(self) -> dict[str, str]:
        return {"name": self.username, "password": self.password}

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"


@dataclass(frozen=True)
class AuthResponse:
    """The two fields of a login response that matter.

    ``ok`` is kept as the raw string the registry sent; anything that is
    not a string is treated as absent.
    """

    ok: str | None = None
    token: str | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> AuthResponse:
        ok = payload.get("ok")
        token = payload.get("token")
        return cls(
            ok=ok if isinstance(ok, str) else None,
            token=token if isinstance(token, str) else None,
        )

    @property
    def succeeded(self) -> bool:
        return self.ok == "true"
