"""Shared type aliases for Scanfixtures."""

from .common import DateInput, HashInput

__all__ = ["DateInput", "HashInput"]
