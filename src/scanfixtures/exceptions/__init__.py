"""Shared exception hierarchy for Scanfixtures."""

from __future__ import annotations

from .base import ScanFixturesError
from .fixtures import FixtureError
from .input import InvalidInputError

__all__ = ["FixtureError", "InvalidInputError", "ScanFixturesError"]
