"""Constants for the npmrc-login CLI."""

APP_NAME = "npmrc-login"

MISSING_FLAGS_MESSAGE = "All flags --registry, --username, and --password are required."
SUCCESS_MESSAGE = "Login successful. Token added to {path}."

LOG_FORMAT = "%(name)s: %(message)s"
