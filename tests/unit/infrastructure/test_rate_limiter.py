"""Unit tests for the injected fixed-window rate limiter."""

import pytest

from core.domain.errors import RateLimited
from core.infrastructure.security import FixedWindowRateLimiter, RateLimitRule


class FakeClock:
    def __init__(self, now: float = 1_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def limiter(clock) -> FixedWindowRateLimiter:
    return FixedWindowRateLimiter(
        rules={
            "api": RateLimitRule(window_seconds=60, max_requests=3),
            "strict": RateLimitRule(window_seconds=60, max_requests=1),
        },
        clock=clock,
    )


def test_request_over_budget_is_rejected(limiter):
    assert [limiter.check("user:u1") for _ in range(3)] == [2, 1, 0]

    with pytest.raises(RateLimited) as exc_info:
        limiter.check("user:u1")

    assert exc_info.value.remaining == 0
    assert exc_info.value.reset_at == 1_060.0


def test_new_window_resets_count(limiter, clock):
    for _ in range(3):
        limiter.check("user:u1")

    clock.now += 60

    assert limiter.check("user:u1") == 2


def test_keys_and_buckets_are_counted_separately(limiter):
    limiter.check("user:u1", "strict")

    assert limiter.check("user:u2", "strict") == 0
    assert limiter.check("user:u1", "api") == 2
    with pytest.raises(RateLimited):
        limiter.check("user:u1", "strict")


def test_disabled_limiter_never_rejects(clock):
    limiter = FixedWindowRateLimiter(
        rules={"api": RateLimitRule(window_seconds=60, max_requests=1)},
        enabled=False,
        clock=clock,
    )

    for _ in range(5):
        limiter.check("user:u1")


def test_instances_do_not_share_state(clock):
    rules = {"api": RateLimitRule(window_seconds=60, max_requests=1)}
    first = FixedWindowRateLimiter(rules=rules, clock=clock)
    second = FixedWindowRateLimiter(rules=rules, clock=clock)

    first.check("user:u1")

    assert second.check("user:u1") == 0
