# locator/api/geolocation.py
from fastapi import APIRouter, Depends, Path
from fastapi.responses import ORJSONResponse
from locator.core.registry import get_resolver
from locator.core.resolver import LocationResolver
from locator.schemas.location import BatchRequest

router = APIRouter(prefix="/geolocation", tags=["geolocation"])


@router.get("/cache/stats", response_class=ORJSONResponse)
def cache_stats(resolver: LocationResolver = Depends(get_resolver)):
    return ORJSONResponse(content=resolver.get_cache_stats().model_dump(), status_code=200)


@router.delete("/cache", response_class=ORJSONResponse)
def clear_cache(resolver: LocationResolver = Depends(get_resolver)):
    resolver.clear_cache()
    return ORJSONResponse(content={"cleared": True}, status_code=200)


@router.post("/batch", response_class=ORJSONResponse)
async def batch_resolve(
    body: BatchRequest,
    resolver: LocationResolver = Depends(get_resolver),
):
    """
    Resolve several IPs sequentially. Each item carries its own `error`,
    one bad address never fails the request.
    """
    results = await resolver.batch_resolve_locations(body.ips)
    content = [r.model_dump(exclude_none=True) for r in results]
    return ORJSONResponse(content=content, status_code=200)


@router.get("/{ip}", response_class=ORJSONResponse)
async def resolve(
    ip: str = Path(..., description="IPv4 or IPv6 address"),
    resolver: LocationResolver = Depends(get_resolver),
):
    """Unknown fields are left out of the payload; private IPs give `{}`."""
    location = await resolver.resolve_location(ip)
    return ORJSONResponse(content=location.model_dump(exclude_none=True), status_code=200)
