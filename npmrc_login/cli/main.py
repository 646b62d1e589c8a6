"""Main entry point for the npmrc-login CLI."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ..auth.constants import ERROR_LOGIN_FAILED
from ..config import DEFAULT_TIMEOUT_SECONDS, USERCONFIG_ENV_VAR, default_npmrc_path
from ..exceptions import AuthError, NpmrcLoginError
from ..flow import LoginOptions, login
from .constants import APP_NAME, LOG_FORMAT, MISSING_FLAGS_MESSAGE, SUCCESS_MESSAGE

app = typer.Typer(
    name=APP_NAME,
    help="Log in to an npm registry and store the auth token in .npmrc",
    add_completion=False,
)
console = Console()


def _version_callback(value: bool) -> None:
    """Handle --version and exit early."""
    if value:
        from npmrc_login import __version__

        typer.echo(f"{APP_NAME} {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format=LOG_FORMAT,
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def main(
    registry: Optional[str] = typer.Option(None, help="Registry URL"),
    username: Optional[str] = typer.Option(None, help="Username"),
    password: Optional[str] = typer.Option(None, help="Password"),
    npmrc: Optional[Path] = typer.Option(
        None,
        "--npmrc",
        envvar=USERCONFIG_ENV_VAR,
        help="Path to .npmrc file or directory [default: $HOME/.npmrc]",
    ),
    use: bool = typer.Option(False, "--use", help="Set the registry=... key in the .npmrc file"),
    timeout: float = typer.Option(DEFAULT_TIMEOUT_SECONDS, help="Request timeout in seconds"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the CLI version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Log in to REGISTRY and add the issued token to .npmrc."""
    _ = version
    if not registry or not username or not password:
        typer.echo(MISSING_FLAGS_MESSAGE)
        raise typer.Exit(1)

    _configure_logging(verbose)

    options = LoginOptions(
        registry=registry,
        username=username,
        password=password,
        npmrc_path=npmrc or default_npmrc_path(),
        use_registry=use,
        timeout=timeout,
    )

    try:
        result = login(options)
    except AuthError as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        if e.message == ERROR_LOGIN_FAILED:
            console.print(f"Response: {escape(json.dumps(e.ok))}", soft_wrap=True)
        raise typer.Exit(1)
    except NpmrcLoginError as e:
        console.print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    typer.echo(SUCCESS_MESSAGE.format(path=result.npmrc_path))


if __name__ == "__main__":
    app()
