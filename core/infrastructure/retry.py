"""Retry with backoff for outbound calls."""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Tuple, Type, TypeVar

from core.infrastructure.logging import get_logger


logger = get_logger(__name__)

T = TypeVar("T")


@dataclass
class RetryPolicy:
    """Retry policy for outbound calls."""

    max_attempts: int = 3
    backoff_seconds: float = 0.0

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")

    def delay_for(self, attempt: int) -> float:
        """Exponential backoff before the attempt after `attempt`."""
        return self.backoff_seconds * (2 ** (attempt - 1))


async def retry_async(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy,
    retry_on: Tuple[Type[BaseException], ...],
    name: str = "operation",
) -> T:
    """
    Run `operation` until it succeeds or the policy is exhausted.

    Only exceptions listed in `retry_on` are retried; anything else
    propagates immediately. The last retryable error is re-raised.
    """
    last_error: BaseException | None = None

    for attempt in range(1, policy.max_attempts + 1):
        try:
            return await operation()
        except retry_on as exc:
            last_error = exc
            logger.warning(
                f"{name} attempt {attempt}/{policy.max_attempts} failed: {exc!r}"
            )

            # If we have more attempts, wait before retry
            if attempt < policy.max_attempts:
                delay = policy.delay_for(attempt)
                if delay > 0:
                    await asyncio.sleep(delay)

    # Every attempt failed with a retryable error
    raise last_error
