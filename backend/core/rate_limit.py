"""
Rate Limiting
=============
In-memory sliding window limiter used by public form endpoints.
"""

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RateLimitResult:
    """Outcome of a rate limit check."""

    allowed: bool
    remaining: int


class SlidingWindowRateLimiter:
    """
    Per-key sliding window limiter.

    Each key may perform max_requests hits within window_seconds. Once more
    than max_keys keys are tracked, keys without recent hits are pruned.
    """

    def __init__(
        self,
        window_seconds: float,
        max_requests: int,
        max_keys: int = 1000,
        clock: Optional[Callable[[], float]] = None,
    ):
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")

        self.window_seconds = window_seconds
        self.max_requests = max_requests
        self.max_keys = max_keys
        self._clock = clock or time.monotonic
        self._hits: dict[str, list[float]] = {}
        self._lock = threading.Lock()

    def _recent(self, timestamps: list[float], now: float) -> list[float]:
        return [ts for ts in timestamps if now - ts < self.window_seconds]

    def _prune(self, now: float) -> None:
        for key in list(self._hits):
            recent = self._recent(self._hits[key], now)
            if recent:
                self._hits[key] = recent
            else:
                del self._hits[key]

    def hit(self, key: str) -> RateLimitResult:
        """Record a request for key if the window allows it."""
        with self._lock:
            now = self._clock()

            if len(self._hits) > self.max_keys:
                self._prune(now)

            recent = self._recent(self._hits.get(key, []), now)
            if len(recent) >= self.max_requests:
                self._hits[key] = recent
                return RateLimitResult(allowed=False, remaining=0)

            recent.append(now)
            self._hits[key] = recent
            return RateLimitResult(allowed=True, remaining=self.max_requests - len(recent))

    def reset(self) -> None:
        """Forget all tracked keys."""
        with self._lock:
            self._hits.clear()

    @property
    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._hits)
