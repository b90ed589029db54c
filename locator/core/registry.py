# locator/core/registry.py
"""Process-wide handle to the LocationResolver built in the app lifespan, read by the routes."""
from __future__ import annotations
from typing import Optional
from threading import RLock
from locator.core.resolver import LocationResolver


class _NotInitialized(RuntimeError):
    pass


_resolver: Optional[LocationResolver] = None
_lock = RLock()


def set_resolver(resolver: Optional[LocationResolver]) -> None:
    """Called during startup (per worker), and with None on shutdown."""
    global _resolver
    with _lock:
        _resolver = resolver


def get_resolver() -> LocationResolver:
    """
    Access the LocationResolver for this worker.
    Raises if called before startup (e.g., at import time).
    """
    r = _resolver
    if r is None:
        raise _NotInitialized("LocationResolver not initialized yet (startup not completed).")
    return r
