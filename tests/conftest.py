import sys
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add the project root (WORKDIR) to sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from locator.core.resolver import LocationResolver  # noqa: E402

PROVIDER = "https://ip-api.com/json/{ip}"

GOOGLE_DNS = {
    "status": "success",
    "country": "United States",
    "countryCode": "US",
    "region": "VA",
    "regionName": "Virginia",
    "city": "Ashburn",
    "zip": "20149",
    "lat": 39.03,
    "lon": -77.5,
    "timezone": "America/New_York",
    "isp": "Google LLC",
    "org": "Google Public DNS",
    "as": "AS15169 Google LLC",
}


class FakeClock:
    """Stands in for both the timer and asyncio.sleep; sleeping just moves time forward."""

    def __init__(self, start: float = 1000.0):
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def provider_url(ip: str) -> str:
    return PROVIDER.format(ip=ip)


@pytest.fixture
def clock():
    return FakeClock()


@pytest_asyncio.fixture
async def resolver(clock):
    async with httpx.AsyncClient() as client:
        yield LocationResolver(client, timer=clock, sleep=clock.sleep)


@pytest.fixture
def client(clock):
    from locator.main import app
    from locator.core.registry import get_resolver

    test_resolver = LocationResolver(timer=clock, sleep=clock.sleep)
    app.dependency_overrides[get_resolver] = lambda: test_resolver
    # Using context manager ensures lifespan runs before the first request
    with TestClient(app) as c:
        c.resolver = test_resolver
        yield c
        # close the lazily created http client on the loop that opened it
        c.portal.call(test_resolver.aclose)
    app.dependency_overrides.clear()
