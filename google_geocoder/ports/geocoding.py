"""Geocoding port - Abstraction for address and coordinate lookups.

Implementation: adapters/geocoding/google_adapter.py
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import GeoLocation


class GeocoderPort(Protocol):
    """Port for geocoding services.

    Geocoding converts a free-text address to coordinates; reverse
    geocoding converts coordinates to a formatted address.
    """

    def geocode(self, query: str) -> GeoLocation:
        """Geocode an address to the coordinates of the first match.

        Raises:
            ZeroResultsError: If the service found nothing.
        """
        ...

    def reverse_geocode(self, location: GeoLocation, api_key: str = "") -> str:
        """Reverse geocode coordinates to the first formatted address.

        Raises:
            NoResultsError: If the service found nothing.
        """
        ...
