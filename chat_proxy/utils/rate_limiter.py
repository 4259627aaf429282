"""
Rate limiter utility for API rate limiting.
"""
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict


@dataclass(frozen=True)
class RateLimitDecision:
    allowed: bool
    limit: int
    remaining: int
    reset_after: float  # seconds until the caller's window resets


@dataclass
class _Window:
    started_at: float
    count: int


class FixedWindowRateLimiter:
    """
    Fixed-window rate limiter keyed per caller.

    Each key may make ``max_requests`` calls per ``window_seconds``. The window
    starts with the key's first call and resets once it has fully elapsed.

    Example:
        limiter = FixedWindowRateLimiter(max_requests=60, window_seconds=60)
        decision = limiter.hit("203.0.113.7")
        if not decision.allowed:
            ...  # reject with 429
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize rate limiter.

        Args:
            max_requests: Maximum number of calls allowed per window
            window_seconds: Window length in seconds
            clock: Monotonic time source, injectable for tests
        """
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: Dict[str, _Window] = {}
        self._lock = threading.Lock()

    def hit(self, key: str) -> RateLimitDecision:
        """Record one call for ``key`` and report whether it is allowed."""
        with self._lock:
            now = self._clock()
            window = self._windows.get(key)
            if window is None or now - window.started_at >= self.window_seconds:
                window = _Window(started_at=now, count=0)
                self._windows[key] = window
                self._evict_expired(now)

            window.count += 1
            allowed = window.count <= self.max_requests
            return RateLimitDecision(
                allowed=allowed,
                limit=self.max_requests,
                remaining=max(self.max_requests - window.count, 0),
                reset_after=max(self.window_seconds - (now - window.started_at), 0.0),
            )

    def _evict_expired(self, now: float) -> None:
        expired = [
            k for k, w in self._windows.items()
            if now - w.started_at >= self.window_seconds
        ]
        for k in expired:
            del self._windows[k]

    def reset(self):
        """Reset the rate limiter (clear all counters)."""
        with self._lock:
            self._windows.clear()
