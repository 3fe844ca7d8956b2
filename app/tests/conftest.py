"""Shared fixtures for seeip tests."""

import json
from unittest.mock import AsyncMock, Mock

import pytest

from seeip.clients.http import HttpFetcher
from seeip.endpoints import Endpoints
from seeip.service import SeeIPClient


@pytest.fixture
def endpoints():
    """Endpoints pointing at a test host."""
    return Endpoints(
        ipv4_url="https://ip4.test/",
        ipv6_url="https://ip6.test/",
        geo_url="https://geo.test/geoip",
    )


@pytest.fixture
def mock_fetcher():
    """HttpFetcher double with sync and async fetch methods."""
    fetcher = Mock(spec=HttpFetcher)
    fetcher.fetch_text = Mock(return_value="")
    fetcher.fetch_text_async = AsyncMock(return_value="")
    return fetcher


@pytest.fixture
def network_up():
    return Mock(return_value=True)


@pytest.fixture
def network_down():
    return Mock(return_value=False)


@pytest.fixture
def make_client(endpoints, mock_fetcher, network_up):
    """Factory building a SeeIPClient around the mocked dependencies.

    Sets the same body on both the sync and async fetch methods.
    """

    def _make(body=None, side_effect=None, network_check=None):
        if body is not None:
            mock_fetcher.fetch_text.return_value = body
            mock_fetcher.fetch_text_async.return_value = body
        if side_effect is not None:
            mock_fetcher.fetch_text.side_effect = side_effect
            mock_fetcher.fetch_text_async.side_effect = side_effect
        return SeeIPClient(
            endpoints=endpoints,
            fetcher=mock_fetcher,
            network_check=network_check or network_up,
        )

    return _make


@pytest.fixture
def geo_payload():
    """Geolocation payload with all fields populated."""
    return {
        "ip": "203.0.113.7",
        "continent_code": "NA",
        "country": "US",
        "country_code": "US",
        "country_code3": "USA",
        "region": "California",
        "region_code": "CA",
        "city": "Mountain View",
        "postal_code": "94035",
        "latitude": 37.5,
        "longitude": -122.25,
        "timezone": "America/Los_Angeles",
        "offset": -25200,
        "asn": 15169,
        "organization": "GOOGLE",
    }


@pytest.fixture
def geo_json(geo_payload):
    return json.dumps(geo_payload)
