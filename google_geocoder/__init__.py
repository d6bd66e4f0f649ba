"""Client for the Google Maps Geocoding web service.

Forward geocoding turns a free-text address into coordinates, reverse
geocoding turns coordinates into a formatted address. Both are
available with plain, API-key or signed premier authentication:

    from google_geocoder import GeoLocation, create_geocoder

    geocoder = create_geocoder()
    location = geocoder.geocode("1 Infinite Loop, Cupertino")
    address = geocoder.reverse_geocode(GeoLocation(37.33, -122.03))
"""

from .adapters.geocoding import ApiKeyAuth, GoogleGeocoderAdapter, NoAuth, PremierAuth
from .adapters.transport import RequestsTransport
from .container import create_geocoder, get_geocoder, reset_geocoder
from .domain import (
    ConfigurationError,
    GeocoderError,
    GeoLocation,
    InvalidInputError,
    InvalidKeyError,
    NoResultsError,
    ParseError,
    TransportError,
    ZeroResultsError,
)

__all__ = [
    "GoogleGeocoderAdapter",
    "RequestsTransport",
    "NoAuth",
    "ApiKeyAuth",
    "PremierAuth",
    "create_geocoder",
    "get_geocoder",
    "reset_geocoder",
    "GeoLocation",
    "GeocoderError",
    "TransportError",
    "ParseError",
    "ZeroResultsError",
    "NoResultsError",
    "InvalidInputError",
    "InvalidKeyError",
    "ConfigurationError",
]
