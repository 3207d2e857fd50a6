"""
Host network services - interface enumeration and host address selection
"""
import ipaddress
import logging
import socket
from typing import Dict, List, Mapping, Optional, Sequence

import psutil

from ..models.schemas import InterfaceAddress

logger = logging.getLogger(__name__)

_FAMILY_NAMES = {
    socket.AF_INET: "IPv4",
    socket.AF_INET6: "IPv6",
}


def _is_internal(address: str) -> bool:
    try:
        return ipaddress.ip_address(address.split("%")[0]).is_loopback
    except ValueError:
        return False


def list_interfaces() -> Dict[str, List[InterfaceAddress]]:
    """
    Enumerate local network interfaces.

    Returns dict keyed by interface name, in the order the OS reports them,
    with one InterfaceAddress per address. Link-layer entries (MAC addresses)
    are kept with their raw family name so callers see the full picture.
    """
    interfaces = {}
    for name, addrs in psutil.net_if_addrs().items():
        entries = []
        for addr in addrs:
            family = _FAMILY_NAMES.get(addr.family, getattr(addr.family, "name", str(addr.family)))
            entries.append(InterfaceAddress(
                address=addr.address,
                family=family,
                internal=_is_internal(addr.address) if family in ("IPv4", "IPv6") else False,
            ))
        interfaces[name] = entries
    return interfaces


def find_host_ip(
    interfaces: Optional[Mapping[str, Sequence[InterfaceAddress]]] = None
) -> Optional[str]:
    """Return the first non-internal IPv4 address, or None if there is none"""
    if interfaces is None:
        interfaces = list_interfaces()

    for name, addrs in interfaces.items():
        for addr in addrs:
            if not addr.internal and addr.family == "IPv4":
                logger.debug(f"Using {addr.address} from interface {name}")
                return addr.address

    logger.debug("No non-internal IPv4 address found")
    return None
