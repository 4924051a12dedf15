"""Test configuration and fixtures."""

import logfire
import pytest

from gate.config import AuthSettings, RateLimitSettings
from tests.di import FrozenClock

TEST_SECRET = "test-signing-key-0123456789abcdef"

# Keep spans local; nothing is sent or printed during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def clock() -> FrozenClock:
    """Frozen clock starting at a fixed instant."""
    return FrozenClock()


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings with a fixed signing key and 2 hour tokens."""
    return AuthSettings(jwt_secret=TEST_SECRET, token_expiry_minutes=120)


@pytest.fixture
def rate_limit_settings() -> RateLimitSettings:
    """One request burst refilling at one token per second."""
    return RateLimitSettings(capacity=1, refill_rate=1.0, shards=4, idle_ttl_seconds=600)
