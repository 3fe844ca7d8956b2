"""Error taxonomy for the seeip client.

Every failure raised by the library is a SeeIPError. The ``kind`` attribute
tells what went wrong and ``cause`` keeps the lower-level exception, so callers
can catch one type and inspect the chain for specifics.

Usage:
    from seeip import SeeIPError, ErrorKind, get_ipv4

    try:
        ip = get_ipv4()
    except SeeIPError as e:
        if e.has_cause(ErrorKind.NETWORK_UNAVAILABLE):
            ...
"""

from enum import Enum
from typing import Any, Iterator, Optional


class ErrorKind(Enum):
    """Kinds of failure reported by the client.

    Attributes:
        NETWORK_UNAVAILABLE: OS reports no usable network interface
        BAD_WEB_REQUEST: Transport failure during the GET request
        NO_GEO_INFO: Geolocation endpoint returned no usable payload
        BAD_IP_VERSION: Internal guard for an invalid IP version selection
        PARSING: Value could not be parsed (IP literal or geo payload)
        UNKNOWN: Outer wrapper raised by every network operation
    """

    NETWORK_UNAVAILABLE = "network_unavailable"
    BAD_WEB_REQUEST = "bad_web_request"
    NO_GEO_INFO = "no_geo_info"
    BAD_IP_VERSION = "bad_ip_version"
    PARSING = "parsing"
    UNKNOWN = "unknown"


DEFAULT_MESSAGES = {
    ErrorKind.NETWORK_UNAVAILABLE: "The network connection is being reported unavailable by the os.",
    ErrorKind.BAD_WEB_REQUEST: "An error occurred during connecting to the API.",
    ErrorKind.NO_GEO_INFO: "The API did not return any information regarding your physical location.",
    ErrorKind.BAD_IP_VERSION: "The parsed ip version {version} is invalid",
    ErrorKind.PARSING: "Could not parse the value as an ip address.",
    ErrorKind.UNKNOWN: "An unknown error occurred during fetching the ip.",
}


class _Details(dict):
    """Placeholder values for default messages; missing ones read "unspecified"."""

    def __missing__(self, key: str) -> str:
        return "unspecified"


class SeeIPError(Exception):
    """Raised by the client for every failure.

    Attributes:
        kind: ErrorKind describing the failure
        message: human-friendly message
        cause: the nested exception, if any
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: Optional[str] = None,
        cause: Optional[BaseException] = None,
        **details: Any,
    ):
        if message is None:
            message = DEFAULT_MESSAGES[kind].format_map(_Details(details))
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details = details
        self.__cause__ = cause

    def __reduce__(self):
        # Restored as SeeIPError(kind, message, cause)
        return (
            self.__class__,
            (self.kind, self.message, self.__cause__),
            {"details": self.details},
        )

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__

    def causes(self) -> Iterator[BaseException]:
        """Iterate the nested cause chain, outermost first."""
        seen = {id(self)}
        current = self.__cause__
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            yield current
            current = current.__cause__

    def has_cause(self, kind: ErrorKind) -> bool:
        """Check whether this error or any SeeIPError in its chain has ``kind``.

        Args:
            kind: ErrorKind to look for

        Returns:
            True if found, False otherwise
        """
        if self.kind == kind:
            return True
        return any(
            isinstance(exc, SeeIPError) and exc.kind == kind for exc in self.causes()
        )

    @property
    def root_cause(self) -> BaseException:
        """Innermost exception of the chain (self when there is no cause)."""
        root: BaseException = self
        for exc in self.causes():
            root = exc
        return root

    def __repr__(self) -> str:
        return f"SeeIPError(kind={self.kind.name}, message={self.message!r})"
