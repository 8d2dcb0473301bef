"""Public API for :mod:`geneos_toolkit`.

Build Geneos Toolkit dataviews and read sampler environment variables::

    from geneos_toolkit import Dataview, Row, print_result_and_exit

    builder = (
        Dataview.builder()
        .set_row_header("Process")
        .add_headline("Hostname", "db-01")
        .add_row(Row("process1").add_cell("Status", "Running"))
    )
    print_result_and_exit(builder)
"""

import logging
from importlib import metadata
from pathlib import Path
from typing import TYPE_CHECKING
import tomllib

if TYPE_CHECKING:
    from geneos_toolkit.builder import DataviewBuilder
    from geneos_toolkit.env import (
        decrypt,
        get_secure_var,
        get_secure_var_or,
        get_var,
        get_var_or,
        is_encrypted,
    )
    from geneos_toolkit.exceptions import (
        DataviewError,
        EnvError,
        MissingRowHeader,
        MissingValue,
    )
    from geneos_toolkit.models import Dataview, Row
    from geneos_toolkit.output import print_result_and_exit
    from geneos_toolkit.rendering import escape_commas, render
    from geneos_toolkit.settings import Settings


def _pyproject_version() -> str | None:
    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    try:
        parsed = tomllib.loads(pyproject.read_text(encoding="utf-8"))
        version = parsed.get("project", {}).get("version")
        if isinstance(version, str) and version:
            return version
    except (FileNotFoundError, OSError, tomllib.TOMLDecodeError):
        return None
    return None


def _resolve_version() -> str:
    # Prefer the local pyproject when running from a source checkout/editable install.
    version = _pyproject_version()
    if version is not None:
        return version

    try:
        return metadata.version("geneos-toolkit")
    except metadata.PackageNotFoundError:  # pragma: no cover
        return "unknown"


__version__ = _resolve_version()

# Library logging stays silent until configure_logging attaches a handler.
logging.getLogger(__name__).addHandler(logging.NullHandler())

_EXPORTS = {
    "Dataview": ("geneos_toolkit.models", "Dataview"),
    "DataviewBuilder": ("geneos_toolkit.builder", "DataviewBuilder"),
    "DataviewError": ("geneos_toolkit.exceptions", "DataviewError"),
    "EnvError": ("geneos_toolkit.exceptions", "EnvError"),
    "MissingRowHeader": ("geneos_toolkit.exceptions", "MissingRowHeader"),
    "MissingValue": ("geneos_toolkit.exceptions", "MissingValue"),
    "Row": ("geneos_toolkit.models", "Row"),
    "Settings": ("geneos_toolkit.settings", "Settings"),
    "decrypt": ("geneos_toolkit.env", "decrypt"),
    "escape_commas": ("geneos_toolkit.rendering", "escape_commas"),
    "get_secure_var": ("geneos_toolkit.env", "get_secure_var"),
    "get_secure_var_or": ("geneos_toolkit.env", "get_secure_var_or"),
    "get_var": ("geneos_toolkit.env", "get_var"),
    "get_var_or": ("geneos_toolkit.env", "get_var_or"),
    "is_encrypted": ("geneos_toolkit.env", "is_encrypted"),
    "print_result_and_exit": ("geneos_toolkit.output", "print_result_and_exit"),
    "render": ("geneos_toolkit.rendering", "render"),
}


def __getattr__(name: str):
    target = _EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_name, attr_name = target
    module = __import__(module_name, fromlist=[attr_name])
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_EXPORTS.keys()))


__all__ = [
    "Dataview",
    "DataviewBuilder",
    "DataviewError",
    "EnvError",
    "MissingRowHeader",
    "MissingValue",
    "Row",
    "Settings",
    "__version__",
    "decrypt",
    "escape_commas",
    "get_secure_var",
    "get_secure_var_or",
    "get_var",
    "get_var_or",
    "is_encrypted",
    "print_result_and_exit",
    "render",
]
