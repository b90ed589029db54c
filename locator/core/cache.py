# locator/core/cache.py
from dataclasses import dataclass
import time
from typing import Callable, Optional

from cachetools import FIFOCache

from locator.core.config import LOCATION_CACHE_SIZE, LOCATION_CACHE_TTL_SEC
from locator.core.logger import get_logger
from locator.schemas.location import CacheStats, LocationRecord

logger = get_logger(__name__)


@dataclass
class CacheEntry:
    value: LocationRecord
    inserted_at: float


class _EvictionLoggingFIFO(FIFOCache):
    def popitem(self):
        key, entry = super().popitem()
        logger.debug(f"Location cache full, evicted {key}")
        return key, entry


class LocationCache:
    """
    In-memory ip -> LocationRecord cache.

    - eviction is FIFO by insertion order (not LRU), one entry per overflowing put
    - expiry is lazy: stale entries are dropped when someone asks for them,
      there is no background sweep
    """

    def __init__(
        self,
        maxsize: int = LOCATION_CACHE_SIZE,
        ttl: float = LOCATION_CACHE_TTL_SEC,
        timer: Callable[[], float] = time.monotonic,
    ):
        self.maxsize = maxsize
        self.ttl = ttl
        self._timer = timer
        self._entries: FIFOCache = _EvictionLoggingFIFO(maxsize=maxsize)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, ip: str) -> bool:
        return ip in self._entries

    def get(self, ip: str) -> Optional[LocationRecord]:
        entry = self._entries.get(ip)
        if entry is None:
            return None

        if self._timer() - entry.inserted_at > self.ttl:
            logger.debug(f"Location cache entry for {ip} expired")
            del self._entries[ip]
            return None

        return entry.value.model_copy()

    def put(self, ip: str, value: LocationRecord) -> None:
        self._entries[ip] = CacheEntry(value=value.model_copy(), inserted_at=self._timer())

    def clear(self) -> None:
        self._entries.clear()

    def stats(self) -> CacheStats:
        return CacheStats(
            size=len(self._entries),
            max_size=self.maxsize,
            expiry_ms=int(self.ttl * 1000),
        )
