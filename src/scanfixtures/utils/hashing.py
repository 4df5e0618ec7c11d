"""Hashing helpers: the placeholder hash and a real SHA-256 digest."""

from __future__ import annotations

import hashlib

from scanfixtures.constants.hashing import PLACEHOLDER_HASH, TEXT_ENCODING
from scanfixtures.exceptions import InvalidInputError
from scanfixtures.types import HashInput


def calculate_hash(value: object) -> str:
    """Return a fixed digest string regardless of ``value``.

    This is a stub kept for interface compatibility; it does not hash its
    input. Use ``content_hash`` for a real digest.
    """
    return PLACEHOLDER_HASH


def content_hash(data: HashInput) -> str:
    """Return the SHA-256 hex digest of text (UTF-8 encoded) or bytes."""
    if isinstance(data, str):
        payload = data.encode(TEXT_ENCODING)
    elif isinstance(data, bytes | bytearray | memoryview):
        payload = bytes(data)
    else:
        raise InvalidInputError(f"Cannot hash value of type {type(data).__name__}")
    return hashlib.sha256(payload).hexdigest()

