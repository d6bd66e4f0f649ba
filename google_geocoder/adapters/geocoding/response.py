"""Geocoding response envelope: decoding and result extraction.

The envelope is parsed with pydantic. Unknown fields are ignored and
keys are matched case-insensitively, so ``Lat`` and ``lat`` are both
read. Missing or null fields, including null entries in ``results``,
fall back to zero values. Coordinates must be JSON numbers; quoted
numbers are rejected. Invalid UTF-8 is replaced with U+FFFD before
parsing.
"""

from __future__ import annotations

import logging
from typing import Any, List

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from ...domain.errors import NoResultsError, ParseError, ZeroResultsError
from ...domain.models import GeoLocation

logger = logging.getLogger(__name__)


class _EnvelopeModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _fold_keys(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {
                str(key).lower(): value
                for key, value in data.items()
                if value is not None
            }
        return data


class _Location(_EnvelopeModel):
    lat: float = Field(default=0.0, strict=True)
    lng: float = Field(default=0.0, strict=True)


class _Geometry(_EnvelopeModel):
    location: _Location = Field(default_factory=_Location)


class ResultEntry(_EnvelopeModel):
    """One candidate returned by the service."""

    formatted_address: str = ""
    geometry: _Geometry = Field(default_factory=_Geometry)

    @property
    def location(self) -> GeoLocation:
        loc = self.geometry.location
        return GeoLocation(latitude=loc.lat, longitude=loc.lng)


class ResponseEnvelope(_EnvelopeModel):
    """Top-level JSON document returned by the geocoding endpoint."""

    status: str = ""
    error_message: str = ""
    results: List[ResultEntry] = Field(default_factory=list)

    @field_validator("results", mode="before")
    @classmethod
    def _null_entries_are_empty(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [{} if entry is None else entry for entry in value]
        return value


def decode_response(data: bytes) -> ResponseEnvelope:
    """Parse a response body into a ResponseEnvelope.

    Does not judge success: an envelope with no results decodes fine.

    Raises:
        ParseError: If the body is not JSON or not an envelope object.
    """
    try:
        return ResponseEnvelope.model_validate_json(data.decode("utf-8", errors="replace"))
    except ValidationError as e:
        logger.debug(
            "Geocoding response could not be decoded",
            extra={"bytes": len(data), "errors": e.error_count()},
        )
        raise ParseError("Malformed geocoding response", cause=e) from e


def extract_lat_lng(envelope: ResponseEnvelope) -> GeoLocation:
    """Return the location of the first result.

    Raises:
        ZeroResultsError: If the envelope has no results.
    """
    if not envelope.results:
        logger.debug("Geocode returned no result", extra={"status": envelope.status})
        raise ZeroResultsError()
    return envelope.results[0].location


def extract_address(envelope: ResponseEnvelope) -> str:
    """Return the formatted address of the first result.

    Raises:
        NoResultsError: If the envelope has no results. The error
            carries the service's status and error message.
    """
    if not envelope.results:
        logger.debug(
            "Reverse geocode returned no result",
            extra={"status": envelope.status},
        )
        raise NoResultsError.from_envelope(envelope.status, envelope.error_message)
    return envelope.results[0].formatted_address
