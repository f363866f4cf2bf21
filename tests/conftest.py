"""Pytest configuration and shared fixtures for oauth1-client-core tests."""

import pytest

from oauth1_client_core.auth import OAuth1Credentials
from oauth1_client_core.capability import _reset_capability_decision
from oauth1_client_core.testing import RecordingSigner


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: clear OAuth1 environment variables and the cached capability decision.

    This prevents one test's configuration from leaking into the next.
    """
    import os

    test_prefixes = ("OAUTH1_", "TEST_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    _reset_capability_decision()
    yield
    _reset_capability_decision()


@pytest.fixture
def credentials():
    return OAuth1Credentials(
        consumer_key="consumer-key",
        consumer_secret="consumer-secret",
        access_token="access-token",
        access_token_secret="access-token-secret",
    )


@pytest.fixture
def signer():
    return RecordingSigner()
