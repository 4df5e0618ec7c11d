"""Application constants exported as a read-only bag."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

MAX_RETRIES: int = 3
TIMEOUT_MS: int = 5000
API_VERSION: str = "v2"
# UUID, not a credential.
REQUEST_ID: str = "550e8400-e29b-41d4-a716-446655440000"

CONSTANTS: Mapping[str, int | str] = MappingProxyType(
    {
        "MAX_RETRIES": MAX_RETRIES,
        "TIMEOUT_MS": TIMEOUT_MS,
        "API_VERSION": API_VERSION,
        "REQUEST_ID": REQUEST_ID,
    }
)
