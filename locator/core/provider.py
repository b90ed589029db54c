# locator/core/provider.py
import asyncio
from numbers import Real
from typing import Any, Mapping
from urllib.parse import quote

import httpx

from locator.core.config import PROVIDER_FIELDS, PROVIDER_TIMEOUT_SEC, PROVIDER_URL
from locator.core.errors import (
    FetchTimeout,
    FetchTransportError,
    ProviderReportedFailure,
    ResponseParseError,
)
from locator.schemas.location import LocationRecord

FIELDS_QUERY = ",".join(PROVIDER_FIELDS)


def provider_url(ip: str, base_url: str = PROVIDER_URL) -> str:
    # the ip is one path segment, "?", "#" and "/" must not leak into the url
    return base_url.format(ip=quote(ip, safe=":"))


async def fetch_location_data(
    client: httpx.AsyncClient,
    ip: str,
    base_url: str = PROVIDER_URL,
    timeout: float = PROVIDER_TIMEOUT_SEC,
) -> dict:
    """
    GET the provider's raw JSON for `ip`.

    The whole request (connect + read) has to finish within `timeout` seconds;
    past that it is cancelled and reported as FetchTimeout.
    Raises a LookupFailure subclass for every kind of failure.
    """
    url = provider_url(ip, base_url)
    try:
        resp = await asyncio.wait_for(
            client.get(url, params={"fields": FIELDS_QUERY}, timeout=timeout),
            timeout=timeout,
        )
    except (asyncio.TimeoutError, httpx.TimeoutException):
        raise FetchTimeout(ip, "Request timeout")
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise FetchTransportError(ip, str(e) or type(e).__name__)

    try:
        data = resp.json()
    except ValueError:
        if resp.is_error:
            raise FetchTransportError(ip, f"HTTP {resp.status_code}")
        raise ResponseParseError(ip, "Failed to parse location response")

    if not isinstance(data, dict):
        raise ResponseParseError(ip, "Failed to parse location response")

    if data.get("status") == "fail":
        raise ProviderReportedFailure(ip, data.get("message") or "Failed to resolve IP location")

    return data


def _text(raw: Mapping[str, Any], key: str) -> str | None:
    val = raw.get(key)
    if isinstance(val, str) and val.strip():
        return val
    return None


def _coord(raw: Mapping[str, Any], key: str) -> float | None:
    # 0.0 is a real coordinate, only missing / non-numeric values are dropped
    val = raw.get(key)
    if isinstance(val, bool) or not isinstance(val, Real):
        return None
    return float(val)


def format_location(raw: Mapping[str, Any]) -> LocationRecord:
    """Provider payload -> LocationRecord, leaving out anything unknown."""
    return LocationRecord(
        country=_text(raw, "country"),
        region=_text(raw, "regionName"),
        city=_text(raw, "city"),
        latitude=_coord(raw, "lat"),
        longitude=_coord(raw, "lon"),
        timezone=_text(raw, "timezone"),
        country_code=_text(raw, "countryCode"),
        region_code=_text(raw, "region"),
        zip_code=_text(raw, "zip"),
        isp=_text(raw, "isp"),
        organization=_text(raw, "org"),
        as_number=_text(raw, "as"),
    )
