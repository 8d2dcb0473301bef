"""Toolkit error hierarchy."""

from __future__ import annotations


class GeneosToolkitError(Exception):
    """Base class for toolkit-specific exceptions."""


class BuilderConsumedError(GeneosToolkitError):
    """Raised when a builder is used again after :meth:`build`."""

    def __init__(self) -> None:
        super().__init__("The DataviewBuilder has already been built and cannot be reused")


# ---------------------------------------------------------------------------
# Dataview construction
# ---------------------------------------------------------------------------


class DataviewError(GeneosToolkitError):
    """Raised by ``DataviewBuilder.build`` when the dataview is incomplete."""

    message = "Invalid dataview"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class MissingRowHeader(DataviewError):
    """No row header was set before building."""

    message = "The Dataview must have a row header"


class MissingValue(DataviewError):
    """No cell value was added before building (headlines do not count)."""

    message = "The Dataview must have at least one value"


# ---------------------------------------------------------------------------
# Environment access
# ---------------------------------------------------------------------------


class EnvError(GeneosToolkitError):
    """Raised when reading or decrypting an environment variable fails."""


class EnvVarNotSet(EnvError):
    """The requested environment variable is not present."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Environment variable error: {name} is not set")


class DecryptionFailed(EnvError):
    """The encrypted payload, key or IV could not be decoded or decrypted."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to decrypt: {reason}")


class MissingKeyFile(EnvError):
    """The key file needed for decryption could not be opened."""

    def __init__(self, path: str | None = None) -> None:
        self.path = path
        super().__init__("Missing key file for decryption")


class KeyFileFormatError(EnvError):
    """The key file does not contain the expected ``salt``/``key``/``iv`` lines."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Key file format error: {reason}")


__all__ = [
    "BuilderConsumedError",
    "DataviewError",
    "DecryptionFailed",
    "EnvError",
    "EnvVarNotSet",
    "GeneosToolkitError",
    "KeyFileFormatError",
    "MissingKeyFile",
    "MissingRowHeader",
    "MissingValue",
]
