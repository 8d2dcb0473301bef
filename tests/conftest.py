"""Shared pytest fixtures for geneos_toolkit tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from fixtures.key_files import VALID_KEY_FILE_CONTENTS


@pytest.fixture
def key_file(tmp_path: Path) -> Path:
    path = tmp_path / "key-file"
    path.write_text(VALID_KEY_FILE_CONTENTS + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep settings.toml/.env lookups and GENEOS_TOOLKIT_* vars out of tests."""
    monkeypatch.chdir(tmp_path)
    for name in ("GENEOS_TOOLKIT_KEY_FILE", "GENEOS_TOOLKIT_LOG_FORMAT", "GENEOS_TOOLKIT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_toolkit_logger():
    yield
    logger = logging.getLogger("geneos_toolkit")
    logger.handlers = [logging.NullHandler()]
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
