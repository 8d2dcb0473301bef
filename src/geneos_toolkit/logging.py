"""Logging setup for the toolkit helpers.

Samplers print their dataview on stdout, so toolkit logs always go to stderr
(or another stream supplied by the caller).
"""

from __future__ import annotations

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import IO, Any

ROOT_LOGGER = "geneos_toolkit"
LOG_FORMATS = ("text", "ndjson")


def _format_timestamp(created: float) -> str:
    """Format a LogRecord ``created`` timestamp as RFC3339-ish UTC."""
    return (
        datetime.fromtimestamp(created, tz=timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def _truncate_value(value: Any, *, max_length: int = 120) -> str:
    text = str(value)
    if len(text) <= max_length:
        return text
    return text[: max_length - 1] + "…"


class JsonFormatter(logging.Formatter):
    """Formatter that renders log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - matches logging.Formatter API
        payload: dict[str, Any] = {
            "ts": _format_timestamp(record.created),
            "level": record.levelname.lower(),
            "event": getattr(record, "event", None) or "log",
            "logger": record.name,
            "message": record.getMessage(),
        }

        data = getattr(record, "data", None)
        if data is not None:
            payload["data"] = data

        if record.exc_info:
            exc_type, exc, _ = record.exc_info
            payload["exc_type"] = getattr(exc_type, "__name__", None)
            payload["exc"] = str(exc)
            payload["traceback"] = "".join(traceback.format_exception(*record.exc_info))

        return json.dumps(payload, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Formatter that renders records into readable single-line text."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - matches logging.Formatter API
        timestamp = _format_timestamp(record.created)
        level_name = record.levelname.upper()
        event_name = getattr(record, "event", None)
        message = record.getMessage()

        head = f"[{timestamp}] {level_name} {event_name or record.name}: {message}"

        data = getattr(record, "data", None)
        if isinstance(data, dict) and data:
            extras = [f"{key}={_truncate_value(data[key])}" for key in sorted(data)[:8]]
            if len(data) > 8:
                extras.append("…")
            head += " (" + ", ".join(extras) + ")"

        if record.exc_info:
            traceback_text = "".join(traceback.format_exception(*record.exc_info)).rstrip("\n")
            if traceback_text:
                head += "\n" + traceback_text

        return head


def configure_logging(
    *,
    log_format: str = "text",
    log_level: int = logging.WARNING,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Attach a single handler to the ``geneos_toolkit`` logger.

    Args:
        log_format:
            Either ``"text"`` or ``"ndjson"``.
        log_level:
            Minimum level for toolkit records.
        stream:
            Destination; defaults to ``sys.stderr``.

    Calling this again replaces the previous handler.
    """
    normalized_format = (log_format or "text").strip().lower()
    if normalized_format not in LOG_FORMATS:
        raise ValueError("log_format must be 'text' or 'ndjson'")

    formatter: logging.Formatter
    if normalized_format == "ndjson":
        formatter = JsonFormatter()
    else:
        formatter = TextFormatter()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(log_level)
    logger.handlers = [handler]
    logger.propagate = False
    return logger


__all__ = [
    "JsonFormatter",
    "LOG_FORMATS",
    "ROOT_LOGGER",
    "TextFormatter",
    "configure_logging",
]
