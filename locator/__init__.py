from locator.core.resolver import LocationResolver
from locator.schemas.location import BatchResult, CacheStats, LocationRecord

__all__ = ["LocationResolver", "LocationRecord", "BatchResult", "CacheStats"]
__version__ = "0.1.0"
