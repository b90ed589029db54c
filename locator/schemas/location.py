# locator/schemas/location.py
from pydantic import BaseModel, Field


class LocationRecord(BaseModel):
    """Resolved geographic attributes for an IP. `None` means unknown."""

    country: str | None = None
    region: str | None = None
    city: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    timezone: str | None = None
    country_code: str | None = None
    region_code: str | None = None
    zip_code: str | None = None
    isp: str | None = None
    organization: str | None = None
    as_number: str | None = None

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)

    # Nice repr for logs
    def __repr__(self) -> str:
        return f"LocationRecord({self.model_dump(exclude_none=True)!r})"


class BatchResult(BaseModel):
    ip: str
    location: LocationRecord = Field(default_factory=LocationRecord)
    error: str | None = None


class BatchRequest(BaseModel):
    ips: list[str] = Field(default_factory=list)


class CacheStats(BaseModel):
    size: int
    max_size: int
    expiry_ms: int
