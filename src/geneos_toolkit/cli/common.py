"""Shared helpers/options for the toolkit CLI."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from typer import BadParameter

from geneos_toolkit.logging import configure_logging
from geneos_toolkit.settings import Settings


class LogFormat(str, Enum):
    """Supported log output formats."""

    text = "text"
    ndjson = "ndjson"


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


def load_settings() -> Settings:
    """Load settings, reporting invalid env/TOML values as a usage error."""
    try:
        return Settings()
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'settings'}: {error['msg']}"
            for error in exc.errors()
        )
        raise BadParameter(f"Invalid settings: {problems}", param_hint="settings") from None


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def resolve_log_level(log_level: Optional[str], default_level: int) -> int:
    """Resolve a string log level to a logging level constant."""
    if not log_level:
        return default_level

    mapping = logging.getLevelNamesMapping()
    resolved = mapping.get(str(log_level).upper())
    if isinstance(resolved, int):
        return resolved

    raise BadParameter(f"Invalid log level: {log_level}", param_hint="log_level")


def resolve_logging(
    *,
    log_format: Optional[LogFormat],
    log_level: Optional[str],
    debug: bool,
    quiet: bool,
    settings: Settings,
) -> tuple[str, int]:
    """Compute effective log format/level with explicit precedence.

    Precedence: --quiet > --debug > --log-level > settings.
    """
    effective_format = log_format.value if log_format else settings.log_format
    base_level = resolve_log_level(log_level, settings.log_level)

    if quiet:
        effective_level = logging.ERROR
    elif debug:
        effective_level = logging.DEBUG
    else:
        effective_level = base_level

    return effective_format, effective_level


def setup_logging(
    *,
    log_format: Optional[LogFormat],
    log_level: Optional[str],
    debug: bool,
    quiet: bool,
    settings: Settings,
) -> None:
    effective_format, effective_level = resolve_logging(
        log_format=log_format,
        log_level=log_level,
        debug=debug,
        quiet=quiet,
        settings=settings,
    )
    configure_logging(log_format=effective_format, log_level=effective_level)


# ---------------------------------------------------------------------------
# Key file resolution
# ---------------------------------------------------------------------------


def resolve_key_file(key_file: Optional[Path], settings: Settings) -> Path:
    """Resolve the key file from the CLI option or settings/env.

    Resolution order:
    1) explicit --key-file
    2) Settings.key_file (env var GENEOS_TOOLKIT_KEY_FILE, settings.toml, etc.)
    """
    candidate = key_file if key_file is not None else settings.key_file
    if candidate is None:
        raise BadParameter(
            "Missing key file. Provide --key-file or set GENEOS_TOOLKIT_KEY_FILE / settings.toml.",
            param_hint="key_file",
        )
    return Path(candidate).expanduser()


# ---------------------------------------------------------------------------
# Common options
# ---------------------------------------------------------------------------

LOG_FORMAT_OPTION = typer.Option(
    None,
    "--log-format",
    case_sensitive=False,
    help="Log output format (text or ndjson). Logs are written to stderr.",
)
LOG_LEVEL_OPTION = typer.Option(
    None,
    "--log-level",
    help="Log level name (DEBUG, INFO, WARNING, ERROR).",
)
DEBUG_OPTION = typer.Option(False, "--debug", help="Shortcut for --log-level DEBUG.")
QUIET_OPTION = typer.Option(False, "--quiet", "-q", help="Only log errors.")
KEY_FILE_OPTION = typer.Option(
    None,
    "--key-file",
    "-k",
    dir_okay=False,
    help="Key file containing salt/key/iv (default: GENEOS_TOOLKIT_KEY_FILE).",
)


__all__ = [
    "DEBUG_OPTION",
    "KEY_FILE_OPTION",
    "LOG_FORMAT_OPTION",
    "LOG_LEVEL_OPTION",
    "LogFormat",
    "QUIET_OPTION",
    "load_settings",
    "resolve_key_file",
    "resolve_log_level",
    "resolve_logging",
    "setup_logging",
]
