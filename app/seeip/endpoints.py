"""Endpoint registry for the seeip API."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from seeip.errors import ErrorKind, SeeIPError


class IPVersion(Enum):
    """IP address family to look up."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"


class Endpoints(BaseModel):
    """Fixed URLs queried by the client.

    The defaults point at the public seeip.org API. Tests may build a client
    with a different instance; the values are not read from the environment.
    """

    model_config = ConfigDict(frozen=True)

    ipv4_url: str = "https://ip4.seeip.org/"
    ipv6_url: str = "https://ip6.seeip.org/"
    geo_url: str = "https://ip.seeip.org/geoip"

    def url_for(self, version: IPVersion) -> str:
        """Return the lookup URL for an IP version.

        Args:
            version: IPVersion to look up

        Returns:
            The endpoint URL

        Raises:
            SeeIPError: BAD_IP_VERSION if version is not an IPVersion member
        """
        if version is IPVersion.IPV4:
            return self.ipv4_url
        if version is IPVersion.IPV6:
            return self.ipv6_url
        raise SeeIPError(ErrorKind.BAD_IP_VERSION, version=version)


DEFAULT_ENDPOINTS = Endpoints()
