"""
Public facade for retrieving the caller's public IP and geolocation.

Every network operation follows the same shape: optional local network check,
one GET to a fixed endpoint, optional parsing. Any failure is re-raised as a
SeeIPError of kind UNKNOWN whose cause is the specific lower-level error.
The async variants differ only at the fetch, which runs in a worker thread.
"""

import ipaddress
from contextlib import contextmanager
from functools import lru_cache
from typing import Callable, Iterator, Optional, Union

from seeip.clients.http import HttpFetcher
from seeip.clients.network import ensure_network_available, is_network_available
from seeip.endpoints import DEFAULT_ENDPOINTS, Endpoints, IPVersion
from seeip.errors import ErrorKind, SeeIPError
from seeip.logging import get_module_logger
from seeip.schemas import GeoInformation, parse_geo_info

logger = get_module_logger()

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def parse_address(ip: str) -> IPAddress:
    """Convert text to an IP address.

    Args:
        ip: IPv4 or IPv6 literal

    Returns:
        IPv4Address or IPv6Address

    Raises:
        SeeIPError: PARSING if the text is not a valid IP literal
    """
    if not isinstance(ip, str):
        logger.debug("invalid_ip_type", value_type=type(ip).__name__)
        raise SeeIPError(
            ErrorKind.PARSING,
            cause=TypeError(f"expected text, got {type(ip).__name__}"),
        )
    try:
        return ipaddress.ip_address(ip)
    except ValueError as e:
        logger.debug("invalid_ip_format", value=repr(ip))
        raise SeeIPError(ErrorKind.PARSING, cause=e) from e


as_ip_address = parse_address


def _version_name(version) -> str:
    return version.value if isinstance(version, IPVersion) else repr(version)


@contextmanager
def _wrap_unknown(log) -> Iterator[None]:
    try:
        yield
    except Exception as e:
        log.warning("operation_failed", error=str(e), error_type=type(e).__name__)
        raise SeeIPError(ErrorKind.UNKNOWN, cause=e) from e


class SeeIPClient:
    """Client for the seeip.org API.

    Args:
        endpoints: Endpoint URLs (defaults to the public seeip.org API)
        fetcher: HttpFetcher used for GET requests
        network_check: Callable reporting local network availability
    """

    def __init__(
        self,
        endpoints: Optional[Endpoints] = None,
        fetcher: Optional[HttpFetcher] = None,
        network_check: Optional[Callable[[], bool]] = None,
    ) -> None:
        self.endpoints = endpoints or DEFAULT_ENDPOINTS
        self._fetcher = fetcher or HttpFetcher()
        self._network_check = network_check or is_network_available
        self._logger = logger.bind(component="seeip_client")

    def get_ipv4(self, skip_network_check: bool = False) -> str:
        """Get the current public IPv4 address.

        Args:
            skip_network_check: Skip checking for network availability

        Returns:
            The endpoint's response body, unmodified

        Raises:
            SeeIPError: UNKNOWN wrapping the specific failure
        """
        return self._get_ip(IPVersion.IPV4, skip_network_check)

    async def get_ipv4_async(self, skip_network_check: bool = False) -> str:
        """Asynchronously get the current public IPv4 address."""
        return await self._get_ip_async(IPVersion.IPV4, skip_network_check)

    def get_ipv6(self, skip_network_check: bool = False) -> str:
        """Get the current public IPv6 address.

        Args:
            skip_network_check: Skip checking for network availability

        Returns:
            The endpoint's response body, unmodified

        Raises:
            SeeIPError: UNKNOWN wrapping the specific failure
        """
        return self._get_ip(IPVersion.IPV6, skip_network_check)

    async def get_ipv6_async(self, skip_network_check: bool = False) -> str:
        """Asynchronously get the current public IPv6 address."""
        return await self._get_ip_async(IPVersion.IPV6, skip_network_check)

    def get_geo_info(self, skip_network_check: bool = False) -> GeoInformation:
        """Get the geolocation information associated with the public IP.

        Args:
            skip_network_check: Skip checking for network availability

        Returns:
            GeoInformation record

        Raises:
            SeeIPError: UNKNOWN wrapping the specific failure
        """
        log = self._logger.bind(operation="get_geo_info")
        with _wrap_unknown(log):
            self._check_network(skip_network_check, log)
            geo = parse_geo_info(self._fetcher.fetch_text(self.endpoints.geo_url))
        log.info("geo_info_retrieved", ip=geo.ip)
        return geo

    async def get_geo_info_async(
        self, skip_network_check: bool = False
    ) -> GeoInformation:
        """Asynchronously get the geolocation information."""
        log = self._logger.bind(operation="get_geo_info_async")
        with _wrap_unknown(log):
            self._check_network(skip_network_check, log)
            text = await self._fetcher.fetch_text_async(self.endpoints.geo_url)
            geo = parse_geo_info(text)
        log.info("geo_info_retrieved", ip=geo.ip)
        return geo

    def _get_ip(self, version: IPVersion, skip_network_check: bool) -> str:
        log = self._logger.bind(operation="get_ip", version=_version_name(version))
        with _wrap_unknown(log):
            self._check_network(skip_network_check, log)
            ip = self._fetcher.fetch_text(self.endpoints.url_for(version))
        log.info("ip_retrieved")
        return ip

    async def _get_ip_async(
        self, version: IPVersion, skip_network_check: bool
    ) -> str:
        log = self._logger.bind(
            operation="get_ip_async", version=_version_name(version)
        )
        with _wrap_unknown(log):
            self._check_network(skip_network_check, log)
            ip = await self._fetcher.fetch_text_async(self.endpoints.url_for(version))
        log.info("ip_retrieved")
        return ip

    def _check_network(self, skip_network_check: bool, log) -> None:
        if skip_network_check:
            log.debug("network_check_skipped")
            return
        ensure_network_available(self._network_check)


@lru_cache
def get_default_client() -> SeeIPClient:
    """Get the process-wide default client used by the module-level functions."""
    return SeeIPClient()


def ipv4(skip_network_check: bool = False) -> str:
    """Get the current public IPv4 address using the default client."""
    return get_default_client().get_ipv4(skip_network_check)


async def ipv4_async(skip_network_check: bool = False) -> str:
    return await get_default_client().get_ipv4_async(skip_network_check)


def ipv6(skip_network_check: bool = False) -> str:
    """Get the current public IPv6 address using the default client."""
    return get_default_client().get_ipv6(skip_network_check)


async def ipv6_async(skip_network_check: bool = False) -> str:
    return await get_default_client().get_ipv6_async(skip_network_check)


def geo_info(skip_network_check: bool = False) -> GeoInformation:
    """Get geolocation information using the default client."""
    return get_default_client().get_geo_info(skip_network_check)


async def geo_info_async(skip_network_check: bool = False) -> GeoInformation:
    return await get_default_client().get_geo_info_async(skip_network_check)
