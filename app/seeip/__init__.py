"""seeip - retrieve your public IP address and geolocation from seeip.org.

Developer Usage:
    import seeip

    ip = seeip.ipv4()
    geo = await seeip.geo_info_async(skip_network_check=True)
    address = seeip.as_ip_address(ip)

    client = seeip.SeeIPClient()
    try:
        client.get_ipv6()
    except seeip.SeeIPError as e:
        if e.has_cause(seeip.ErrorKind.BAD_WEB_REQUEST):
            ...
"""

from seeip.endpoints import DEFAULT_ENDPOINTS, Endpoints, IPVersion
from seeip.errors import ErrorKind, SeeIPError
from seeip.schemas import GeoInformation, parse_geo_info
from seeip.service import (
    SeeIPClient,
    as_ip_address,
    geo_info,
    geo_info_async,
    get_default_client,
    ipv4,
    ipv4_async,
    ipv6,
    ipv6_async,
    parse_address,
)

__all__ = [
    "SeeIPClient",
    "get_default_client",
    "ipv4",
    "ipv4_async",
    "ipv6",
    "ipv6_async",
    "geo_info",
    "geo_info_async",
    "parse_address",
    "as_ip_address",
    "GeoInformation",
    "parse_geo_info",
    "Endpoints",
    "DEFAULT_ENDPOINTS",
    "IPVersion",
    "ErrorKind",
    "SeeIPError",
]
