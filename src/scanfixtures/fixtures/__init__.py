"""Mock secret-like strings for exercising a scanner's test-file exclusion."""

from .loader import load_test_secrets, validate_test_secrets

TEST_SECRETS = load_test_secrets()

__all__ = ["TEST_SECRETS", "load_test_secrets", "validate_test_secrets"]
