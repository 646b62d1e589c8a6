"""Configuration helpers for npmrc-login."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_TIMEOUT_SECONDS = 30.0

NPMRC_FILE_NAME = ".npmrc"
NPMRC_FILE_MODE = 0o644

# Same variable npm itself reads for the per-user config file.
USERCONFIG_ENV_VAR = "NPM_CONFIG_USERCONFIG"


def default_npmrc_path() -> Path:
    """Return ``$NPM_CONFIG_USERCONFIG`` if set, else ``$HOME/.npmrc``."""
    override = os.environ.get(USERCONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / NPMRC_FILE_NAME


def sanitize_registry_url(url: str) -> str:
    """Ensure the registry URL never ends with a trailing slash."""

    return url.rstrip("/")
