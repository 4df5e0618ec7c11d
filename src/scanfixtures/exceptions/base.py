"""Root exception type."""

from __future__ import annotations


class ScanFixturesError(Exception):
    """Base class for every error raised by this package."""
