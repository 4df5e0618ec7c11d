"""Loader for the bundled mock-secret fixture document.

Reads the YAML file once, checks its shape, and returns a read-only mapping.
Raises FixtureError on any violation (fail-fast).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from scanfixtures.constants.fixtures import TEST_SECRET_KEYS, TEST_SECRETS_FILENAME
from scanfixtures.exceptions import FixtureError

logger = logging.getLogger(__name__)

FIXTURES_DIR: Path = Path(__file__).parent
DEFAULT_TEST_SECRETS_PATH: Path = FIXTURES_DIR / TEST_SECRETS_FILENAME


def load_test_secrets(path: Path | None = None) -> Mapping[str, str]:
    """Load and validate the mock-secret fixture bag.

    Args:
        path: YAML document to read. Defaults to the bundled
            ``test_secrets.yaml``.

    Returns:
        Read-only mapping of fixture name to synthetic secret string.
    """
    source = path or DEFAULT_TEST_SECRETS_PATH
    data = _load_yaml_file(source)
    validate_test_secrets(data, str(source))
    logger.debug("Loaded %d test secrets from %s", len(data), source)
    return MappingProxyType(dict(data))


def validate_test_secrets(data: dict[str, Any], source_path: str) -> None:
    """Check the exact key set and that every value is a non-empty string."""
    keys = set(data)
    missing = TEST_SECRET_KEYS - keys
    if missing:
        raise FixtureError(f"Fixture file {source_path} missing keys: {sorted(missing)}")

    unknown = keys - TEST_SECRET_KEYS
    if unknown:
        raise FixtureError(f"Fixture file {source_path} has unknown keys: {sorted(map(str, unknown))}")

    for key, value in data.items():
        if not isinstance(value, str) or not value.strip():
            raise FixtureError(f"Fixture file {source_path}: '{key}' must be a non-empty string")


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load and parse a single YAML file with safe_load only."""
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise FixtureError(f"Cannot read fixture file {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise FixtureError(f"Fixture file {path} is not valid UTF-8: {exc}") from exc
    except yaml.YAMLError as exc:
        raise FixtureError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise FixtureError(f"Fixture file {path} must contain a mapping")

    return raw
