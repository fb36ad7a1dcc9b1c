# Standard library imports
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
import math
import threading
import time


@dataclass(frozen=True)
class RateLimitResult:
    allowed: bool
    limit: int
    remaining: int
    retry_after: int  # seconds until the oldest hit leaves the window


class SlidingWindowRateLimiter:
    """
    Per-key sliding log limiter: at most `limit` hits per `window_seconds`.

    Keys are client addresses. Rejected hits are not recorded, so a
    blocked client regains capacity as soon as its oldest hit expires.
    """

    def __init__(
        self,
        limit: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
        sweep_every: int = 1000,
    ):
        if limit < 1:
            raise ValueError("limit must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock
        self._hits: dict[str, deque[float]] = {}
        self._lock = threading.Lock()
        self._sweep_every = sweep_every
        self._calls_since_sweep = 0

    def __len__(self) -> int:
        return len(self._hits)

    def _evict(self, hits: deque[float], now: float) -> None:
        cutoff = now - self.window_seconds
        while hits and hits[0] <= cutoff:
            hits.popleft()

    def _sweep(self, now: float) -> None:
        for key in list(self._hits):
            hits = self._hits[key]
            self._evict(hits, now)
            if not hits:
                del self._hits[key]

    def hit(self, key: str) -> RateLimitResult:
        """Record a request for `key` if it is within the limit."""
        with self._lock:
            now = self._clock()

            self._calls_since_sweep += 1
            if self._calls_since_sweep >= self._sweep_every:
                self._calls_since_sweep = 0
                self._sweep(now)

            hits = self._hits.setdefault(key, deque())
            self._evict(hits, now)

            if len(hits) >= self.limit:
                retry_after = max(1, math.ceil(hits[0] + self.window_seconds - now))
                return RateLimitResult(allowed=False, limit=self.limit, remaining=0, retry_after=retry_after)

            hits.append(now)
            return RateLimitResult(
                allowed=True,
                limit=self.limit,
                remaining=self.limit - len(hits),
                retry_after=0,
            )

    def reset(self, key: str | None = None) -> None:
        with self._lock:
            if key is None:
                self._hits.clear()
            else:
                self._hits.pop(key, None)
