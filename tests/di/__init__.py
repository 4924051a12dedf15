"""Mock providers for testing."""

from .clock import FrozenClock, MockClockProvider
from .notification import MockNotificationProvider
from .password import MockPasswordProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "FrozenClock",
    "MockClockProvider",
    "MockNotificationProvider",
    "MockPasswordProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
