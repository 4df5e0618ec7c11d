"""Date, hashing, and constants helpers."""

from scanfixtures.constants.app import CONSTANTS

from .dates import format_date
from .hashing import calculate_hash, content_hash

constants = CONSTANTS
formatDate = format_date
calculateHash = calculate_hash

__all__ = [
    "CONSTANTS",
    "calculateHash",
    "calculate_hash",
    "constants",
    "content_hash",
    "formatDate",
    "format_date",
]
