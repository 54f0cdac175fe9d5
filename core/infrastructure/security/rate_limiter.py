"""
In-process fixed-window rate limiter.

One instance is created with the application and injected into routes;
its state lives and dies with that instance.
"""
import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from core.domain.errors import RateLimited


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateLimitRule:
    """Budget for one bucket."""

    window_seconds: int
    max_requests: int


@dataclass
class _Window:
    count: int
    reset_at: float


class FixedWindowRateLimiter:
    """
    Per-key request counter over fixed windows.

    Keys are arbitrary strings (usually the caller id); each key is counted
    separately per named bucket.
    """

    def __init__(
        self,
        rules: Dict[str, RateLimitRule],
        enabled: bool = True,
        clock: Callable[[], float] = time.time,
    ):
        self.rules = rules
        self.enabled = enabled
        self._clock = clock
        self._windows: Dict[Tuple[str, str], _Window] = {}

    def check(self, key: str, bucket: str = "api") -> int:
        """
        Record one request for `key` in `bucket`.

        Returns:
            Requests remaining in the current window

        Raises:
            RateLimited: If the window budget is exhausted
            KeyError: If the bucket is unknown
        """
        rule = self.rules[bucket]
        if not self.enabled:
            return rule.max_requests

        now = self._clock()
        self._evict_expired(now)

        window = self._windows.get((bucket, key))
        if window is None or now >= window.reset_at:
            window = _Window(count=0, reset_at=now + rule.window_seconds)
            self._windows[(bucket, key)] = window

        if window.count >= rule.max_requests:
            logger.warning(f"Rate limit exceeded: bucket={bucket} key={key}")
            raise RateLimited(remaining=0, reset_at=window.reset_at)

        window.count += 1
        return rule.max_requests - window.count

    def _evict_expired(self, now: float) -> None:
        expired = [k for k, w in self._windows.items() if now >= w.reset_at]
        for k in expired:
            del self._windows[k]
