"""Reading and rewriting the npm user config file (.npmrc).

Only two directive shapes are understood, ``registry=<url>`` and
``//<host>/:_authToken=<token>``. Every other line passes through untouched
and keeps its position.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path

from .config import NPMRC_FILE_MODE, NPMRC_FILE_NAME
from .exceptions import NpmrcError

logger = logging.getLogger(__name__)

REGISTRY_PREFIX = "registry="


def resolve_npmrc_path(path: str | os.PathLike[str]) -> Path:
    """Return ``<path>/.npmrc`` when ``path`` is a directory, else ``path``."""
    target = Path(path).expanduser()
    if target.is_dir():
        return target / NPMRC_FILE_NAME
    return target


def auth_token_prefix(host: str) -> str:
    return f"//{host}/:_authToken="


def auth_token_line(host: str, token: str) -> str:
    return f"{auth_token_prefix(host)}{token}"


def registry_line(registry: str) -> str:
    return f"{REGISTRY_PREFIX}{registry}"


def upsert_lines(
    lines: list[str],
    host: str,
    token: str,
    registry: str,
    use_registry: bool = False,
) -> list[str]:
    """Replace or append the auth token line (and optionally the registry line).

    Every ``registry=`` line is rewritten when ``use_registry`` is set. The
    registry line is appended only if its text appears nowhere in the
    joined result, so a longer line that contains it also counts.
    """
    prefix = auth_token_prefix(host)
    new_auth = auth_token_line(host, token)
    new_registry = registry_line(registry)

    result = list(lines)
    found = False
    for i, line in enumerate(result):
        if line.startswith(prefix):
            result[i] = new_auth
            found = True
        if use_registry and line.startswith(REGISTRY_PREFIX):
            result[i] = new_registry

    if not found:
        result.append(new_auth)

    if use_registry and new_registry not in "\n".join(result):
        result.append(new_registry)

    return result


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` only; a final empty piece from a trailing newline is dropped."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def update_npmrc_text(
    text: str,
    host: str,
    token: str,
    registry: str,
    use_registry: bool = False,
) -> str:
    lines = upsert_lines(split_lines(text), host, token, registry, use_registry)
    return "\n".join(lines)


def read_npmrc(path: Path) -> str:
    """Return the file's text, or an empty string if it does not exist."""
    try:
        with open(path, newline="") as f:
            return f.read()
    except FileNotFoundError:
        return ""
    except OSError as e:
        raise NpmrcError(f"Error reading .npmrc file: {e}", path) from e


def _discard(tmp_path: str) -> None:
    if os.path.exists(tmp_path):
        os.unlink(tmp_path)


def write_npmrc(path: Path, content: str) -> None:
    """Replace the file's content atomically.

    A new file gets mode 0644; an existing file keeps its mode.
    """
    target = path.resolve()
    try:
        mode = stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        mode = NPMRC_FILE_MODE
    except OSError as e:
        raise NpmrcError(f"Error writing to .npmrc file: {e}", path) from e

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=target.parent, prefix=".npmrc_", suffix=".tmp")
    except OSError as e:
        raise NpmrcError(f"Error writing to .npmrc file: {e}", path) from e

    try:
        with os.fdopen(fd, "w", newline="") as f:
            f.write(content)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, target)
    except OSError as e:
        _discard(tmp_path)
        raise NpmrcError(f"Error writing to .npmrc file: {e}", path) from e
    except BaseException:
        _discard(tmp_path)
        raise


def update_npmrc(
    path: str | os.PathLike[str],
    host: str,
    token: str,
    registry: str,
    use_registry: bool = False,
) -> Path:
    """Upsert the auth token for ``host`` into the .npmrc at ``path``.

    Args:
        path: The config file, or a directory holding ``.npmrc``.
        host: Registry ``host[:port]`` the token belongs to.
        token: Auth token issued by the registry.
        registry: Full registry URL, used for the ``registry=`` line.
        use_registry: Also point ``registry=`` at this registry.

    Returns:
        The path of the file that was written.

    Raises:
        NpmrcError: If the file cannot be read (other than not existing) or written.
    """
    npmrc_path = resolve_npmrc_path(path)
    content = read_npmrc(npmrc_path)
    updated = update_npmrc_text(content, host, token, registry, use_registry)
    write_npmrc(npmrc_path, updated)
    logger.debug("Wrote %s (%d lines)", npmrc_path, updated.count("\n") + 1)
    return npmrc_path
