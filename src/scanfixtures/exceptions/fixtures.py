"""Fixture-loading exceptions."""

from __future__ import annotations

from scanfixtures.exceptions.base import ScanFixturesError


class FixtureError(ScanFixturesError, ValueError):
    """Raised when the bundled fixture document is missing or malformed."""
