"""CLI entrypoint for :mod:`geneos_toolkit`.

Helpers for shell-based samplers:

- `get-var`  - print an environment variable, decrypting `+encs+` values.
- `decrypt`  - decrypt a single `+encs+` value with a key file.
- `version`  - print the toolkit version.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import NoReturn, Optional

import typer

from geneos_toolkit import __version__
from geneos_toolkit.env import decrypt, get_var, is_encrypted
from geneos_toolkit.exceptions import EnvError

from .common import (
    DEBUG_OPTION,
    KEY_FILE_OPTION,
    LOG_FORMAT_OPTION,
    LOG_LEVEL_OPTION,
    QUIET_OPTION,
    LogFormat,
    load_settings,
    resolve_key_file,
    setup_logging,
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    help=(
        "Geneos Toolkit helpers.\n\n"
        "Read sampler environment variables (including Geneos `+encs+` encrypted values).\n\n"
        "```bash\n"
        "geneos-toolkit get-var DB_PASSWORD --secure --key-file /opt/geneos/key-file\n"
        "```\n"
    ),
    no_args_is_help=True,
    rich_markup_mode="markdown",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print the toolkit version and exit.",
    ),
) -> None:
    """Geneos Toolkit helpers."""


def _fail(exc: EnvError) -> NoReturn:
    logger.error(str(exc), extra={"event": "env.failed", "data": {"error": type(exc).__name__}})
    typer.echo(f"ERROR: {exc}", err=True)
    raise typer.Exit(code=1)


@app.command("version")
def version_command() -> None:
    """Print the toolkit version."""
    typer.echo(__version__)


@app.command("get-var")
def get_var_command(
    name: str = typer.Argument(..., help="Environment variable name."),
    default: Optional[str] = typer.Option(
        None,
        "--default",
        "-d",
        help="Value printed when the variable is not set.",
    ),
    secure: bool = typer.Option(
        False,
        "--secure",
        "-s",
        help="Decrypt the value if it starts with +encs+.",
    ),
    key_file: Optional[Path] = KEY_FILE_OPTION,
    log_format: Optional[LogFormat] = LOG_FORMAT_OPTION,
    log_level: Optional[str] = LOG_LEVEL_OPTION,
    debug: bool = DEBUG_OPTION,
    quiet: bool = QUIET_OPTION,
) -> None:
    """Print an environment variable."""

    settings = load_settings()
    setup_logging(log_format=log_format, log_level=log_level, debug=debug, quiet=quiet, settings=settings)

    if default is not None and name not in os.environ:
        typer.echo(default)
        return

    try:
        value = get_var(name)
        # The key file is only needed once the value turns out to be encrypted.
        if secure and is_encrypted(value):
            value = decrypt(value, resolve_key_file(key_file, settings))
    except EnvError as exc:
        _fail(exc)

    logger.debug("Resolved environment variable %s", name, extra={"event": "env.resolved"})
    typer.echo(value)


@app.command("decrypt")
def decrypt_command(
    value: str = typer.Argument(..., help="Value to decrypt; plain values are printed unchanged."),
    key_file: Optional[Path] = KEY_FILE_OPTION,
    log_format: Optional[LogFormat] = LOG_FORMAT_OPTION,
    log_level: Optional[str] = LOG_LEVEL_OPTION,
    debug: bool = DEBUG_OPTION,
    quiet: bool = QUIET_OPTION,
) -> None:
    """Decrypt a +encs+ value."""

    settings = load_settings()
    setup_logging(log_format=log_format, log_level=log_level, debug=debug, quiet=quiet, settings=settings)

    try:
        plaintext = decrypt(value, resolve_key_file(key_file, settings)) if is_encrypted(value) else value
    except EnvError as exc:
        _fail(exc)

    typer.echo(plaintext)


def main() -> None:
    """Entrypoint used by console scripts and `python -m geneos_toolkit`."""
    app()


__all__ = ["app", "main"]
