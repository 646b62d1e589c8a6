"""Test configuration for npmrc-login tests."""

import json
from unittest.mock import MagicMock

import httpx
import pytest


def _build_response(status_code: int = 200, body: bytes = b"") -> MagicMock:
    response = MagicMock(spec=httpx.Response)
    response.status_code = status_code
    response.content = body
    response.text = body.decode()
    response.json.side_effect = lambda: json.loads(body)
    return response


@pytest.fixture
def make_response():
    """Factory for fake httpx responses."""
    return _build_response


@pytest.fixture
def ok_response():
    """A registry reply that confirms the login."""
    return _build_response(
        201, b'{"ok": "true", "id": "org.couchdb.user:alice", "token": "npm_abcdef1234567890"}'
    )


@pytest.fixture(autouse=True)
def _isolate_home(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.npmrc."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.delenv("NPM_CONFIG_USERCONFIG", raising=False)
