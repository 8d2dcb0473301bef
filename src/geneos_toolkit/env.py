"""Environment variable helpers, including Geneos ``+encs+`` encrypted values.

Encrypted values are ``+encs+`` followed by the hex encoded AES-256-CBC
ciphertext (PKCS7 padded). The key file written by Geneos looks like::

    salt=89A6A795C9CCECB5
    key=26D6EDD53A0AFA8FA1AA3FBCD2FFF2A0BF4809A4E04511F629FC732C2A42A8FC
    iv=472A3557ADDD2525AD4E555738636A67
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from geneos_toolkit.exceptions import (
    DecryptionFailed,
    EnvError,
    EnvVarNotSet,
    KeyFileFormatError,
    MissingKeyFile,
)

logger = logging.getLogger(__name__)

ENCRYPTED_PREFIX = "+encs+"


@dataclass(frozen=True, slots=True)
class KeyFile:
    """Decryption parameters read from a Geneos key file (hex strings)."""

    salt: str
    key: str
    iv: str


def get_var(name: str) -> str:
    """Return the value of environment variable ``name``.

    Raises:
        EnvVarNotSet: the variable is not present.
    """
    try:
        return os.environ[name]
    except KeyError:
        raise EnvVarNotSet(name) from None


def get_var_or(name: str, default: str) -> str:
    return os.environ.get(name, default)


def is_encrypted(value: str) -> bool:
    return value.startswith(ENCRYPTED_PREFIX)


def parse_key_file(path: str | os.PathLike[str]) -> KeyFile:
    """Read ``salt``, ``key`` and ``iv`` from a key file.

    Blank lines and lines without ``=`` are ignored; any other ``name=value``
    line is rejected with its 1-based line number.
    """
    try:
        handle = Path(path).open("r", encoding="utf-8")
    except OSError:
        raise MissingKeyFile(str(path)) from None

    entries: dict[str, str] = {}
    with handle:
        try:
            for line_num, raw_line in enumerate(handle, start=1):
                line = raw_line.strip()
                if not line or "=" not in line:
                    continue
                name, value = line.split("=", 1)
                if name not in ("salt", "key", "iv"):
                    raise KeyFileFormatError(f"Unexpected content at line {line_num}: '{name}'")
                entries[name] = value
        except (OSError, UnicodeDecodeError) as exc:
            raise EnvError(f"IO error: {exc}") from exc

    for name in ("salt", "key", "iv"):
        if name not in entries:
            raise KeyFileFormatError(f"Missing {name} in key file")

    return KeyFile(salt=entries["salt"], key=entries["key"], iv=entries["iv"])


def _from_hex(text: str, what: str) -> bytes:
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise DecryptionFailed(f"Invalid {what}: {exc}") from exc


def decrypt(value: str, key_file: str | os.PathLike[str]) -> str:
    """Decrypt a ``+encs+`` value with the parameters in ``key_file``.

    Values that are not encrypted are returned unchanged without reading the
    key file.
    """
    if len(value) < len(ENCRYPTED_PREFIX) or not is_encrypted(value):
        return value

    ciphertext = _from_hex(value[len(ENCRYPTED_PREFIX):], "hex encoding")
    params = parse_key_file(key_file)
    key = _from_hex(params.key, "key hex")
    iv = _from_hex(params.iv, "iv hex")

    try:
        decryptor = Cipher(algorithms.AES256(key), modes.CBC(iv)).decryptor()
    except ValueError:
        raise DecryptionFailed("Invalid key or IV length") from None

    try:
        padded = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
        plaintext = unpadder.update(padded) + unpadder.finalize()
    except ValueError as exc:
        raise DecryptionFailed(f"Decryption failed: {exc}") from exc

    try:
        decoded = plaintext.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecryptionFailed(f"Invalid UTF-8 in decrypted data: {exc}") from exc

    logger.debug("Decrypted value using key file %s", key_file)
    return decoded


def get_secure_var(name: str, key_file: str | os.PathLike[str]) -> str:
    """Return environment variable ``name``, decrypting it if needed."""
    value = get_var(name)
    if is_encrypted(value):
        return decrypt(value, key_file)
    return value


def get_secure_var_or(name: str, key_file: str | os.PathLike[str], default: str) -> str:
    """Like :func:`get_secure_var` but return ``default`` when the variable is unset.

    Decryption and key file errors still propagate.
    """
    try:
        value = get_var(name)
    except EnvVarNotSet:
        return default
    if is_encrypted(value):
        return decrypt(value, key_file)
    return value


__all__ = [
    "ENCRYPTED_PREFIX",
    "KeyFile",
    "decrypt",
    "get_secure_var",
    "get_secure_var_or",
    "get_var",
    "get_var_or",
    "is_encrypted",
    "parse_key_file",
]
