# locator/core/config.py
import os
from dotenv import load_dotenv

load_dotenv()

# Provider settings
# ip-api free tier allows 15 requests/minute, hence one request every 4s
PROVIDER_URL = "https://ip-api.com/json/{ip}"
PROVIDER_FIELDS = (
    "status",
    "message",
    "country",
    "countryCode",
    "region",
    "regionName",
    "city",
    "zip",
    "lat",
    "lon",
    "timezone",
    "isp",
    "org",
    "as",
)
PROVIDER_TIMEOUT_SEC = 5.0
PROVIDER_MIN_INTERVAL_SEC = 4.0

# Location cache settings
LOCATION_CACHE_TTL_SEC = 24 * 60 * 60
LOCATION_CACHE_SIZE = 1000

# Private / local ranges, never sent to the provider
PRIVATE_NETWORKS = (
    "10.0.0.0/8",
    "172.16.0.0/12",
    "192.168.0.0/16",
    "169.254.0.0/16",  # link-local
)

# Service settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
