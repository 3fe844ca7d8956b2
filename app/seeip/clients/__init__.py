"""Clients used by the seeip facade.

Public API (Package Level):
- HttpFetcher: GET a URL and return its body as text
- is_network_available: Local network interface check
- ensure_network_available: Raise when no interface is up
"""

from seeip.clients.http import HttpFetcher
from seeip.clients.network import ensure_network_available, is_network_available

__all__ = [
    "HttpFetcher",
    "is_network_available",
    "ensure_network_available",
]
