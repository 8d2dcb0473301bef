"""Sampler entry-point helper: print a dataview and exit."""

from __future__ import annotations

import logging
import sys
from typing import NoReturn

from geneos_toolkit.builder import DataviewBuilder
from geneos_toolkit.exceptions import DataviewError
from geneos_toolkit.models import Dataview

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BUILD_FAILED = 1


def print_result_and_exit(source: Dataview | DataviewBuilder) -> NoReturn:
    """Print ``source`` to stdout and exit 0, or report the build error and exit 1.

    ``source`` may be a finished :class:`Dataview` or a builder that has not
    been built yet.
    """
    try:
        dataview = source.build() if isinstance(source, DataviewBuilder) else source
    except DataviewError as exc:
        logger.error(
            "Dataview build failed",
            extra={"event": "dataview.build_failed", "data": {"error": type(exc).__name__}},
        )
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(EXIT_BUILD_FAILED)

    print(dataview)
    sys.exit(EXIT_OK)


__all__ = ["EXIT_BUILD_FAILED", "EXIT_OK", "print_result_and_exit"]
