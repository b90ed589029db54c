import asyncio

import pytest

from locator.core.rate_limit import RateLimiter


@pytest.mark.asyncio
async def test_first_request_does_not_wait(clock):
    limiter = RateLimiter(timer=clock, sleep=clock.sleep)
    await limiter.acquire()
    assert clock.sleeps == []
    assert limiter.last_request_at == clock.now


@pytest.mark.asyncio
async def test_waits_out_the_remaining_interval(clock):
    limiter = RateLimiter(timer=clock, sleep=clock.sleep)
    await limiter.acquire()

    await limiter.acquire()
    assert clock.sleeps == [pytest.approx(4.0)]

    clock.advance(1.5)
    await limiter.acquire()
    assert clock.sleeps[-1] == pytest.approx(2.5)


@pytest.mark.asyncio
async def test_no_wait_once_interval_has_passed(clock):
    limiter = RateLimiter(timer=clock, sleep=clock.sleep)
    await limiter.acquire()
    clock.advance(10)
    await limiter.acquire()
    assert clock.sleeps == []


@pytest.mark.asyncio
async def test_interval_measured_from_request_start(clock):
    limiter = RateLimiter(timer=clock, sleep=clock.sleep)
    await limiter.acquire()
    started = limiter.last_request_at

    # a slow request finishing 3s later doesn't push the next slot back
    clock.advance(3)
    await limiter.acquire()
    assert limiter.last_request_at - started == pytest.approx(4.0)


@pytest.mark.asyncio
async def test_concurrent_callers_are_spaced(clock):
    limiter = RateLimiter(timer=clock, sleep=clock.sleep)
    starts = []

    async def call():
        await limiter.acquire()
        starts.append(clock())

    await asyncio.gather(call(), call(), call())

    starts.sort()
    assert starts[1] - starts[0] >= 4.0
    assert starts[2] - starts[1] >= 4.0


@pytest.mark.asyncio
async def test_real_sleep_path():
    limiter = RateLimiter(min_interval=0.05)
    loop = asyncio.get_running_loop()

    await limiter.acquire()
    t0 = loop.time()
    await limiter.acquire()
    assert loop.time() - t0 >= 0.04
