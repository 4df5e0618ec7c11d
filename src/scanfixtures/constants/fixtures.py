"""Fixture document location and shape."""

from __future__ import annotations

TEST_SECRETS_FILENAME: str = "test_secrets.yaml"

TEST_SECRET_KEYS: frozenset[str] = frozenset(
    {
        "TEST_AWS_KEY",
        "TEST_GITHUB_TOKEN",
        "TEST_STRIPE_KEY",
        "MOCK_SECRET",
        "FAKE_API_KEY",
    }
)
