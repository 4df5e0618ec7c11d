"""Shared pytest fixtures for fixture-document tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from scanfixtures.fixtures.loader import DEFAULT_TEST_SECRETS_PATH


@pytest.fixture(scope="session")
def test_secrets_path() -> Path:
    """Return the bundled mock-secret YAML document."""
    return DEFAULT_TEST_SECRETS_PATH


@pytest.fixture()
def write_yaml(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes YAML text to a temp file and returns its path."""

    def _write(text: str) -> Path:
        path = tmp_path / "secrets.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
