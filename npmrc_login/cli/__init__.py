"""Command-line interface for npmrc-login."""
