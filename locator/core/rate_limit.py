# locator/core/rate_limit.py
import asyncio
import time
from typing import Awaitable, Callable, Optional

from locator.core.config import PROVIDER_MIN_INTERVAL_SEC
from locator.core.logger import get_logger

logger = get_logger(__name__)


class RateLimiter:
    """
    Keeps successive provider requests at least `min_interval` seconds apart,
    measured between request *starts*.

    Only the wait + timestamp update is serialized; the caller runs its
    request after `acquire()` returns, outside the lock.
    """

    def __init__(
        self,
        min_interval: float = PROVIDER_MIN_INTERVAL_SEC,
        timer: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.min_interval = min_interval
        self._timer = timer
        self._sleep = sleep
        self._lock = asyncio.Lock()
        self.last_request_at: Optional[float] = None

    async def acquire(self) -> None:
        async with self._lock:
            if self.last_request_at is not None:
                dt = self._timer() - self.last_request_at
                if dt < self.min_interval:
                    wait = self.min_interval - dt
                    logger.debug(f"Rate limit: waiting {wait:.2f}s before next provider request")
                    await self._sleep(wait)
            self.last_request_at = self._timer()
