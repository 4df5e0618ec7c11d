"""Constants used by the hashing helpers."""

from __future__ import annotations

TEXT_ENCODING: str = "utf-8"

# SHA-256 of empty input; returned verbatim by the placeholder hash.
PLACEHOLDER_HASH: str = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
