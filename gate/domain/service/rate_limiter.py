"""Per-identity token bucket rate limiter."""

import threading
from dataclasses import dataclass, field

import logfire

from gate.config import RateLimitSettings
from gate.domain.value import RateDecision
from gate.util.clock import Clock
from gate.util.error import ConfigurationError

from .base import Service


@dataclass
class _Bucket:
    tokens: float
    refilled_at: float
    last_seen: float


@dataclass
class _Shard:
    lock: threading.Lock = field(default_factory=threading.Lock)
    buckets: dict[str, _Bucket] = field(default_factory=dict)
    evicted_at: float = 0.0


class RateLimiter(Service):
    """Token bucket per client identity.

    Buckets start full, hold at most `capacity` tokens and refill continuously
    at `refill_rate` tokens per second. The bucket map is split into shards,
    each guarded by its own lock, and lookup, refill and acquisition for one
    identity happen under that shard's lock.

    One instance is shared by the whole application.
    """

    def __init__(self, settings: RateLimitSettings, clock: Clock) -> None:
        """Initialize rate limiter.

        Args:
            settings: Capacity, refill rate, shard count and idle TTL
            clock: Time source

        Raises:
            ConfigurationError: If the settings cannot describe a bucket
        """
        if settings.capacity < 1:
            raise ConfigurationError("Rate limit capacity must be at least 1")
        if settings.refill_rate <= 0:
            raise ConfigurationError("Rate limit refill rate must be positive")
        if settings.shards < 1:
            raise ConfigurationError("Rate limiter needs at least one shard")

        self.capacity = settings.capacity
        self.refill_rate = settings.refill_rate
        self.idle_ttl = float(settings.idle_ttl_seconds)
        self.clock = clock
        self._shards = [_Shard() for _ in range(settings.shards)]

    def _shard_for(self, identity: str) -> _Shard:
        return self._shards[hash(identity) % len(self._shards)]

    def try_acquire(self, identity: str, cost: int = 1) -> RateDecision:
        """Take `cost` tokens from the identity's bucket if available.

        Args:
            identity: Client identity, usually the remote address
            cost: Number of tokens to take

        Returns:
            Decision with remaining tokens and, when throttled, the seconds
            until the request could succeed

        Raises:
            ValueError: If cost is below 1 or above the bucket capacity
        """
        if cost < 1 or cost > self.capacity:
            raise ValueError(
                f"Cost must be between 1 and {self.capacity}, got {cost}"
            )

        now = self.clock.now().timestamp()
        shard = self._shard_for(identity)

        with shard.lock:
            if now - shard.evicted_at >= self.idle_ttl:
                self._evict_shard(shard, now)

            bucket = shard.buckets.get(identity)
            if bucket is None:
                bucket = _Bucket(
                    tokens=float(self.capacity), refilled_at=now, last_seen=now
                )
                shard.buckets[identity] = bucket
            else:
                elapsed = max(0.0, now - bucket.refilled_at)
                bucket.tokens = min(
                    float(self.capacity), bucket.tokens + elapsed * self.refill_rate
                )
                bucket.refilled_at = now
            bucket.last_seen = now

            if bucket.tokens >= cost:
                bucket.tokens -= cost
                return RateDecision(admitted=True, remaining=bucket.tokens)

            retry_after = (cost - bucket.tokens) / self.refill_rate
            return RateDecision(
                admitted=False, remaining=bucket.tokens, retry_after=retry_after
            )

    def _evict_shard(self, shard: _Shard, now: float) -> int:
        idle = [
            identity
            for identity, bucket in shard.buckets.items()
            if now - bucket.last_seen >= self.idle_ttl
        ]
        for identity in idle:
            del shard.buckets[identity]
        shard.evicted_at = now
        return len(idle)

    def evict_idle(self) -> int:
        """Remove buckets that have not been touched for the idle TTL.

        Returns:
            Number of buckets removed
        """
        now = self.clock.now().timestamp()
        removed = 0
        for shard in self._shards:
            with shard.lock:
                removed += self._evict_shard(shard, now)

        if removed:
            logfire.info("Idle rate limit buckets evicted", count=removed)
        return removed

    def __len__(self) -> int:
        total = 0
        for shard in self._shards:
            with shard.lock:
                total += len(shard.buckets)
        return total
