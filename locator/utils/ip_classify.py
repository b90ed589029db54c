# locator/utils/ip_classify.py
import ipaddress
from functools import lru_cache

from locator.core.config import PRIVATE_NETWORKS

_NETWORKS = tuple(ipaddress.ip_network(n) for n in PRIVATE_NETWORKS)


@lru_cache(maxsize=4096)
def is_private_ip(ip: str | None) -> bool:
    """
    True for addresses that can never resolve to a useful location:
    empty/missing, loopback, RFC1918 and IPv4 link-local.
    Unparseable strings are *not* private; the provider gets to reject them.
    """
    if ip is None:
        return True
    ip = ip.strip()
    if not ip:
        return True

    try:
        addr = ipaddress.ip_address(ip)
    except ValueError:
        return False

    if addr.is_loopback:
        return True

    # ::ffff:10.0.0.1 and friends
    if addr.version == 6 and addr.ipv4_mapped is not None:
        addr = addr.ipv4_mapped
        if addr.is_loopback:
            return True

    if addr.version != 4:
        return False
    return any(addr in net for net in _NETWORKS)
