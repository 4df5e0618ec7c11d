"""Input-validation exceptions."""

from __future__ import annotations

from scanfixtures.exceptions.base import ScanFixturesError


class InvalidInputError(ScanFixturesError, ValueError):
    """Raised when an argument cannot be interpreted as the expected kind of value."""
