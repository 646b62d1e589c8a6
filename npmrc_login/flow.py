"""Top-level login sequence: authenticate, then record the token."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .auth import Credentials, authenticate, mask_token, registry_host
from .config import DEFAULT_TIMEOUT_SECONDS, default_npmrc_path
from .npmrc import update_npmrc

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginOptions:
    """Everything one login run needs, as given on the command line."""

    registry: str
    username: str
    password: str = field(repr=False)
    npmrc_path: Path = field(default_factory=default_npmrc_path)
    use_registry: bool = False
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def credentials(self) -> Credentials:
        return Credentials(username=self.username, password=self.password)


@dataclass
class LoginResult:
    """Result of a successful login."""

    token: str
    registry_host: str
    npmrc_path: Path

    @property
    def masked_token(self) -> str:
        return mask_token(self.token)


def login(options: LoginOptions) -> LoginResult:
    """Log in to the registry and store the token in the .npmrc file.

    The registry URL is checked before any request is made. Nothing is
    written unless the registry issued a token.
    """
    host = registry_host(options.registry)
    token = authenticate(options.registry, options.credentials, timeout=options.timeout)
    logger.info("Logged in to %s as %s", host, options.username)

    npmrc_path = update_npmrc(
        options.npmrc_path,
        host,
        token,
        options.registry,
        use_registry=options.use_registry,
    )
    return LoginResult(token=token, registry_host=host, npmrc_path=npmrc_path)
