"""Unit tests for RateLimiter."""

import threading

import pytest

from gate.config import RateLimitSettings
from gate.domain.service import RateLimiter
from gate.util.error import ConfigurationError


@pytest.fixture
def limiter(rate_limit_settings, clock) -> RateLimiter:
    return RateLimiter(settings=rate_limit_settings, clock=clock)


class TestTryAcquire:
    """Tests for try_acquire method."""

    def test_admit_throttle_then_admit_after_refill(self, limiter, clock):
        """Capacity 1 at 1/s: admit, throttle, admit again one second later."""
        assert limiter.try_acquire("1.2.3.4").admitted is True

        throttled = limiter.try_acquire("1.2.3.4")
        assert throttled.admitted is False
        assert throttled.retry_after == pytest.approx(1.0)

        clock.advance(seconds=1)
        assert limiter.try_acquire("1.2.3.4").admitted is True

    def test_burst_admits_exactly_capacity(self, clock):
        limiter = RateLimiter(
            settings=RateLimitSettings(capacity=3, refill_rate=1.0), clock=clock
        )

        decisions = [limiter.try_acquire("10.0.0.1") for _ in range(4)]

        assert [d.admitted for d in decisions] == [True, True, True, False]
        assert decisions[2].remaining == 0

        clock.advance(seconds=1)
        assert limiter.try_acquire("10.0.0.1").admitted is True
        assert limiter.try_acquire("10.0.0.1").admitted is False

    def test_refill_never_exceeds_capacity(self, clock):
        limiter = RateLimiter(
            settings=RateLimitSettings(capacity=3, refill_rate=2.0), clock=clock
        )
        limiter.try_acquire("10.0.0.1")

        clock.advance(seconds=1000)
        decision = limiter.try_acquire("10.0.0.1")

        assert decision.admitted is True
        assert decision.remaining == 2

    def test_identities_have_independent_buckets(self, limiter):
        assert limiter.try_acquire("1.1.1.1").admitted is True
        assert limiter.try_acquire("2.2.2.2").admitted is True
        assert limiter.try_acquire("1.1.1.1").admitted is False

    @pytest.mark.parametrize("cost", [0, -1, 2])
    def test_cost_outside_bucket_range_rejected(self, limiter, cost):
        with pytest.raises(ValueError):
            limiter.try_acquire("1.2.3.4", cost=cost)

    def test_concurrent_acquires_never_exceed_capacity(self, clock):
        limiter = RateLimiter(
            settings=RateLimitSettings(capacity=5, refill_rate=1.0, shards=2),
            clock=clock,
        )
        admitted = []
        lock = threading.Lock()
        start = threading.Barrier(16)

        def worker():
            start.wait()
            for _ in range(10):
                if limiter.try_acquire("9.9.9.9").admitted:
                    with lock:
                        admitted.append(1)

        threads = [threading.Thread(target=worker) for _ in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(admitted) == 5


class TestEviction:
    """Tests for idle bucket eviction."""

    def test_evict_idle_removes_untouched_buckets(self, limiter, clock):
        limiter.try_acquire("1.1.1.1")
        clock.advance(seconds=300)
        limiter.try_acquire("2.2.2.2")

        clock.advance(seconds=300)
        removed = limiter.evict_idle()

        assert removed == 1
        assert len(limiter) == 1

    def test_evicted_identity_starts_with_full_bucket(self, limiter, clock):
        limiter.try_acquire("1.1.1.1")
        clock.advance(seconds=600)
        limiter.evict_idle()

        assert limiter.try_acquire("1.1.1.1").admitted is True

    def test_idle_buckets_reclaimed_lazily_on_access(self, clock):
        limiter = RateLimiter(
            settings=RateLimitSettings(capacity=1, shards=1, idle_ttl_seconds=60),
            clock=clock,
        )
        limiter.try_acquire("1.1.1.1")

        clock.advance(seconds=61)
        limiter.try_acquire("2.2.2.2")

        assert len(limiter) == 1


class TestSettings:
    """Tests for settings validation."""

    @pytest.mark.parametrize(
        "settings",
        [
            RateLimitSettings(capacity=0),
            RateLimitSettings(refill_rate=0),
            RateLimitSettings(shards=0),
        ],
    )
    def test_invalid_settings_rejected(self, settings, clock):
        with pytest.raises(ConfigurationError):
            RateLimiter(settings=settings, clock=clock)
