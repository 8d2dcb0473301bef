"""Command line interface for :mod:`geneos_toolkit`."""

from __future__ import annotations

from .app import app, main

__all__ = ["app", "main"]
