"""Unit tests for the geolocation schema and parser."""

import json

import pytest
from pydantic import ValidationError

from seeip.errors import ErrorKind, SeeIPError
from seeip.schemas import GeoInformation, parse_geo_info


@pytest.mark.unit
def test_parse_geo_info_all_fields(geo_json, geo_payload):
    geo = parse_geo_info(geo_json)

    assert geo.to_dict() == geo_payload


@pytest.mark.unit
def test_parse_geo_info_missing_fields_default():
    geo = parse_geo_info('{"ip": "203.0.113.7"}')

    assert geo.ip == "203.0.113.7"
    assert geo.city == ""
    assert geo.latitude == 0.0
    assert geo.offset == 0
    assert geo.asn == 0


@pytest.mark.unit
def test_parse_geo_info_null_fields_default():
    geo = parse_geo_info(
        json.dumps({"ip": "203.0.113.7", "city": None, "latitude": None, "asn": None})
    )

    assert geo.city == ""
    assert geo.latitude == 0.0
    assert geo.asn == 0


@pytest.mark.unit
def test_parse_geo_info_ignores_unknown_keys():
    geo = parse_geo_info('{"ip": "203.0.113.7", "isp": "Example"}')

    assert not hasattr(geo, "isp")


@pytest.mark.unit
@pytest.mark.parametrize("body", ["null", "", "   ", "{not json", "<html></html>"])
def test_parse_geo_info_no_value(body):
    with pytest.raises(SeeIPError) as exc_info:
        parse_geo_info(body)

    assert exc_info.value.kind == ErrorKind.NO_GEO_INFO


@pytest.mark.unit
def test_parse_geo_info_malformed_keeps_decode_error():
    with pytest.raises(SeeIPError) as exc_info:
        parse_geo_info("{not json")

    assert isinstance(exc_info.value.cause, json.JSONDecodeError)


@pytest.mark.unit
@pytest.mark.parametrize(
    "body",
    [
        '["203.0.113.7"]',
        '"203.0.113.7"',
        '{"latitude": "north"}',
        '{"asn": 15169.5}',
        '{"city": ["Ottawa"]}',
    ],
)
def test_parse_geo_info_type_mismatch(body):
    with pytest.raises(SeeIPError) as exc_info:
        parse_geo_info(body)

    assert exc_info.value.kind == ErrorKind.PARSING
    assert isinstance(exc_info.value.cause, ValidationError)


@pytest.mark.unit
def test_geo_information_is_frozen():
    geo = GeoInformation(ip="203.0.113.7")

    with pytest.raises(ValidationError):
        geo.ip = "198.51.100.1"


@pytest.mark.unit
def test_geo_information_defaults():
    geo = GeoInformation()

    assert geo.to_dict() == {
        "ip": "",
        "continent_code": "",
        "country": "",
        "country_code": "",
        "country_code3": "",
        "region": "",
        "region_code": "",
        "city": "",
        "postal_code": "",
        "latitude": 0.0,
        "longitude": 0.0,
        "timezone": "",
        "offset": 0,
        "asn": 0,
        "organization": "",
    }
