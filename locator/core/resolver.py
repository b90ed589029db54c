# locator/core/resolver.py
from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Callable, Iterable, Optional

import httpx

from locator.core.cache import LocationCache
from locator.core.config import (
    LOCATION_CACHE_SIZE,
    LOCATION_CACHE_TTL_SEC,
    PROVIDER_MIN_INTERVAL_SEC,
    PROVIDER_TIMEOUT_SEC,
    PROVIDER_URL,
)
from locator.core.errors import LookupFailure
from locator.core.logger import get_logger
from locator.core.provider import fetch_location_data, format_location
from locator.core.rate_limit import RateLimiter
from locator.schemas.location import BatchResult, CacheStats, LocationRecord
from locator.utils.ip_classify import is_private_ip

logger = get_logger(__name__)


class LocationResolver:
    """
    Resolves IP addresses to locations through the provider, with a
    time-expiring FIFO cache in front and a start-to-start rate limit
    on outgoing requests.

    One instance per process; it owns its cache, rate limiter and
    (unless one is passed in) its HTTP client.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        *,
        base_url: str = PROVIDER_URL,
        timeout: float = PROVIDER_TIMEOUT_SEC,
        min_interval: float = PROVIDER_MIN_INTERVAL_SEC,
        cache_size: int = LOCATION_CACHE_SIZE,
        cache_ttl: float = LOCATION_CACHE_TTL_SEC,
        timer: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.cache = LocationCache(maxsize=cache_size, ttl=cache_ttl, timer=timer)
        self.rate_limiter = RateLimiter(min_interval=min_interval, timer=timer, sleep=sleep)
        self._client_instance = client
        self._owns_client = client is None

    # ---- Lazy HTTP client --------------------------------------------------
    @property
    def client(self) -> httpx.AsyncClient:
        if self._client_instance is None:
            logger.info("Initializing geolocation HTTP client")
            self._client_instance = httpx.AsyncClient(timeout=self.timeout)
        return self._client_instance

    async def aclose(self) -> None:
        if self._owns_client and self._client_instance is not None:
            await self._client_instance.aclose()
            self._client_instance = None

    async def __aenter__(self) -> "LocationResolver":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ---- Resolution --------------------------------------------------------
    async def resolve_location(self, ip: str) -> LocationRecord:
        """
        Never raises for lookup problems: private addresses and every
        provider failure come back as an empty LocationRecord.
        """
        if is_private_ip(ip):
            return LocationRecord()
        ip = ip.strip()

        cached = self.cache.get(ip)
        if cached is not None:
            logger.debug(f"Location cache hit for {ip}")
            return cached

        try:
            await self.rate_limiter.acquire()
            raw = await fetch_location_data(self.client, ip, self.base_url, self.timeout)
            location = format_location(raw)
        except LookupFailure as e:
            logger.error(f"Failed to resolve location for IP {ip}: {e.message}")
            return LocationRecord()

        self.cache.put(ip, location)
        return location

    async def batch_resolve_locations(self, ips: Iterable[str]) -> list[BatchResult]:
        """
        Resolve one after another, in input order. A failure on one address
        is recorded on its own result and the batch carries on.
        """
        results = []
        for ip in ips:
            try:
                location = await self.resolve_location(ip)
                results.append(BatchResult(ip=ip, location=location))
            except Exception as e:
                results.append(BatchResult(ip=ip, location=LocationRecord(), error=str(e) or "Unknown error"))
        return results

    # ---- Cache admin -------------------------------------------------------
    def clear_cache(self) -> None:
        self.cache.clear()
        logger.info("Location cache cleared")

    def get_cache_stats(self) -> CacheStats:
        return self.cache.stats()
