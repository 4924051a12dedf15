"""Time source abstraction.

Every time-based rule (token expiry, invitation validity, bucket refill) reads
the current instant from a Clock so tests can pin and advance time.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone


class Clock(ABC):
    """Source of the current UTC instant."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant as a timezone-aware UTC datetime."""
        pass


class SystemClock(Clock):
    """Wall clock backed by the system time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
