# Third-party imports
import pytest

# Local application imports
from app.services.rate_limit import SlidingWindowRateLimiter


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def test_allows_up_to_limit_then_rejects():
    limiter = SlidingWindowRateLimiter(limit=3, window_seconds=60, clock=FakeClock())

    results = [limiter.hit("1.2.3.4") for _ in range(4)]

    assert [r.allowed for r in results] == [True, True, True, False]
    assert [r.remaining for r in results] == [2, 1, 0, 0]
    assert results[-1].retry_after == 60


def test_keys_are_independent():
    limiter = SlidingWindowRateLimiter(limit=1, window_seconds=60, clock=FakeClock())

    assert limiter.hit("1.1.1.1").allowed
    assert not limiter.hit("1.1.1.1").allowed
    assert limiter.hit("2.2.2.2").allowed


def test_window_slides():
    clock = FakeClock()
    limiter = SlidingWindowRateLimiter(limit=2, window_seconds=60, clock=clock)

    limiter.hit("a")
    clock.advance(30)
    limiter.hit("a")
    assert not limiter.hit("a").allowed

    # First hit leaves the window, second is still inside it
    clock.advance(30)
    assert limiter.hit("a").allowed
    result = limiter.hit("a")
    assert not result.allowed
    assert result.retry_after == 30


def test_rejected_hits_are_not_recorded():
    clock = FakeClock()
    limiter = SlidingWindowRateLimiter(limit=1, window_seconds=10, clock=clock)

    limiter.hit("a")
    for _ in range(5):
        clock.advance(1)
        limiter.hit("a")

    clock.advance(5)
    assert limiter.hit("a").allowed


def test_idle_keys_are_swept():
    clock = FakeClock()
    limiter = SlidingWindowRateLimiter(limit=5, window_seconds=10, clock=clock, sweep_every=3)

    limiter.hit("a")
    limiter.hit("b")
    clock.advance(11)
    limiter.hit("c")

    assert len(limiter) == 1


def test_reset():
    limiter = SlidingWindowRateLimiter(limit=1, window_seconds=60, clock=FakeClock())
    limiter.hit("a")
    limiter.hit("b")

    limiter.reset("a")
    assert limiter.hit("a").allowed
    assert not limiter.hit("b").allowed

    limiter.reset()
    assert len(limiter) == 0


@pytest.mark.parametrize("limit, window", [(0, 60), (5, 0)])
def test_rejects_invalid_configuration(limit: int, window: int):
    with pytest.raises(ValueError):
        SlidingWindowRateLimiter(limit=limit, window_seconds=window)
