"""Settings for the geneos_toolkit CLI using pydantic-settings.

Loaded from (in precedence order):
init kwargs > env vars > .env file > settings.toml > defaults.

The dataview core never reads these; they only configure the command line
helpers and logging.
"""
from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _toml_settings_source() -> dict[str, Any]:
    """Load settings from ``settings.toml`` if present.

    Accepts either top-level keys or a nested ``[geneos_toolkit]`` table.
    """

    path = Path("settings.toml")
    if not path.exists():
        return {}

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return {}

    nested = data.get("geneos_toolkit")
    if isinstance(nested, dict):
        return nested
    return data


class Settings(BaseSettings):
    """Runtime settings for the toolkit helpers.

    Override via init kwargs, environment variables (``GENEOS_TOOLKIT_*``),
    a ``.env`` file, or an optional ``settings.toml``.
    """

    model_config = SettingsConfigDict(
        env_prefix="GENEOS_TOOLKIT_",
        env_file=".env",
        extra="ignore",
    )

    key_file: Path | None = Field(
        default=None,
        description="Key file used to decrypt +encs+ values when no --key-file is given.",
    )

    # Logging
    log_format: Literal["text", "ndjson"] = Field(default="text")
    log_level: int = Field(default=logging.WARNING)

    @field_validator("log_level", mode="before")
    @classmethod
    def _coerce_level_name(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip().isdigit():
            resolved = logging.getLevelNamesMapping().get(v.strip().upper())
            if resolved is None:
                raise ValueError(f"Invalid log level: {v}")
            return resolved
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):  # type: ignore[override]
        toml_source = lambda: _toml_settings_source()
        # Precedence: init > env vars > .env > TOML > defaults
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            toml_source,
            file_secret_settings,
        )


__all__ = ["Settings"]
