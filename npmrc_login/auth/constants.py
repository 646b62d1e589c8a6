"""Constants for the registry login endpoint."""

from __future__ import annotations

# CouchDB-style user document path used by npm registries for login.
USER_ENDPOINT = "/-/user/org.couchdb.user:"

# Characters left unescaped in the username path segment (scoped names, dots).
USERNAME_SAFE_CHARS = "@."

OK_TRUE = "true"

# Error messages
ERROR_LOGIN_FAILED = "Login failed."
ERROR_TOKEN_MISSING = "Token not found in response."
ERROR_NO_HOST = "Registry URL has no host"
