"""Immutable domain models for the geocoding client.

Models are frozen dataclasses with slots. They carry no behavior and
have no external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeoLocation:
    """GPS coordinates representing a geographic location.

    Values reported by the service are passed through unchanged, so no
    range validation is applied here.
    """

    latitude: float
    longitude: float
