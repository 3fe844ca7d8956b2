"""Local network availability check.

Asks the OS whether any non-loopback network interface is up. No packet is
sent, so a True result does not mean the internet (or the seeip API) is
reachable.
"""

import ipaddress
import socket

import psutil

from seeip.errors import ErrorKind, SeeIPError
from seeip.logging import get_module_logger

logger = get_module_logger()

_LOOPBACK_NAMES = frozenset({"lo", "lo0"})
_IP_FAMILIES = (socket.AF_INET, socket.AF_INET6)


def _is_loopback(name: str, addrs) -> bool:
    ips = []
    for addr in addrs:
        if addr.family not in _IP_FAMILIES:
            continue
        try:
            # IPv6 link-local addresses may carry a "%scope" suffix
            ips.append(ipaddress.ip_address(addr.address.split("%", 1)[0]))
        except ValueError:
            continue
    if not ips:
        return name in _LOOPBACK_NAMES
    return all(ip.is_loopback for ip in ips)


def is_network_available() -> bool:
    """Check whether the OS reports a usable network interface.

    Returns:
        True if at least one non-loopback interface is up, False otherwise
    """
    try:
        stats = psutil.net_if_stats()
        addrs = psutil.net_if_addrs()
    except OSError as e:
        logger.warning("network_interfaces_unreadable", error=str(e))
        return False

    for name, stat in stats.items():
        if not stat.isup:
            continue
        if _is_loopback(name, addrs.get(name, [])):
            continue
        logger.debug("network_interface_up", interface=name)
        return True

    logger.debug("no_network_interface_up", interfaces=sorted(stats))
    return False


def ensure_network_available(check=is_network_available) -> None:
    """Raise if the network is reported unavailable.

    Args:
        check: Callable returning the availability flag

    Raises:
        SeeIPError: NETWORK_UNAVAILABLE when the check returns False
    """
    if not check():
        logger.warning("network_unavailable")
        raise SeeIPError(ErrorKind.NETWORK_UNAVAILABLE)
