"""Pydantic schemas for the geolocation endpoint."""

import json
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from seeip.errors import ErrorKind, SeeIPError
from seeip.logging import get_module_logger

logger = get_module_logger()


class GeoInformation(BaseModel):
    """Geolocation information associated with the caller's IP.

    Absent or null fields take the zero value of their type. Unknown keys are
    ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "ip": "203.0.113.7",
                "continent_code": "NA",
                "country": "United States",
                "country_code": "US",
                "country_code3": "USA",
                "region": "California",
                "region_code": "CA",
                "city": "Mountain View",
                "postal_code": "94035",
                "latitude": 37.386,
                "longitude": -122.0838,
                "timezone": "America/Los_Angeles",
                "offset": -25200,
                "asn": 15169,
                "organization": "GOOGLE",
            }
        },
    )

    ip: str = ""
    continent_code: str = ""
    country: str = ""
    country_code: str = ""
    country_code3: str = ""
    region: str = ""
    region_code: str = ""
    city: str = ""
    postal_code: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    timezone: str = ""
    offset: int = 0
    asn: int = 0
    organization: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def null_to_default(cls, v: Any, info: ValidationInfo) -> Any:
        """Map JSON null to the field's zero value."""
        if v is None:
            return cls.model_fields[info.field_name].default
        return v

    def to_dict(self) -> dict:
        """Convert to dictionary format keyed like the JSON payload."""
        return self.model_dump()


def parse_geo_info(text: str) -> GeoInformation:
    """Parse the geolocation endpoint's body.

    Args:
        text: Response body from the geolocation endpoint

    Returns:
        GeoInformation record

    Raises:
        SeeIPError: NO_GEO_INFO if the body is empty, malformed or ``null``;
            PARSING if the JSON does not match the GeoInformation shape
    """
    try:
        payload = json.loads(text)
    except (json.JSONDecodeError, TypeError) as e:
        logger.warning("geo_info_not_json", error=str(e), body=text)
        raise SeeIPError(ErrorKind.NO_GEO_INFO, cause=e) from e

    if payload is None:
        logger.warning("geo_info_null")
        raise SeeIPError(ErrorKind.NO_GEO_INFO)

    try:
        geo = GeoInformation.model_validate(payload)
    except ValidationError as e:
        logger.warning("geo_info_invalid", error_count=e.error_count())
        raise SeeIPError(
            ErrorKind.PARSING,
            message="The geolocation payload does not match the expected shape.",
            cause=e,
        ) from e

    logger.debug("geo_info_parsed", ip=geo.ip, country_code=geo.country_code)
    return geo
