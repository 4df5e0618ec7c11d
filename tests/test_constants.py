"""Tests for the exported constants bag."""

from __future__ import annotations

import pytest

from scanfixtures.constants.app import API_VERSION, CONSTANTS, MAX_RETRIES, REQUEST_ID, TIMEOUT_MS
from scanfixtures.utils import constants


def test_constant_values() -> None:
    assert CONSTANTS["MAX_RETRIES"] == 3
    assert CONSTANTS["TIMEOUT_MS"] == 5000
    assert CONSTANTS["API_VERSION"] == "v2"
    assert CONSTANTS["REQUEST_ID"] == "550e8400-e29b-41d4-a716-446655440000"


def test_bag_mirrors_module_constants() -> None:
    assert dict(CONSTANTS) == {
        "MAX_RETRIES": MAX_RETRIES,
        "TIMEOUT_MS": TIMEOUT_MS,
        "API_VERSION": API_VERSION,
        "REQUEST_ID": REQUEST_ID,
    }


def test_utils_exports_same_bag() -> None:
    assert constants is CONSTANTS


def test_bag_is_read_only() -> None:
    with pytest.raises(TypeError):
        CONSTANTS["MAX_RETRIES"] = 5  # type: ignore[index]
    with pytest.raises(TypeError):
        del CONSTANTS["API_VERSION"]  # type: ignore[attr-defined]
