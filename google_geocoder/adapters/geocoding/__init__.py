"""Geocoding adapters - Implementations of GeocoderPort.

Available implementations:
- GoogleGeocoderAdapter: Google Maps Geocoding API (key or premier auth)
"""

from .auth import ApiKeyAuth, NoAuth, PremierAuth
from .google_adapter import GoogleGeocoderAdapter
from .response import ResponseEnvelope, decode_response, extract_address, extract_lat_lng
from .signing import compute_signature, decode_secret, sign_query

__all__ = [
    "GoogleGeocoderAdapter",
    "NoAuth",
    "ApiKeyAuth",
    "PremierAuth",
    "ResponseEnvelope",
    "decode_response",
    "extract_lat_lng",
    "extract_address",
    "compute_signature",
    "decode_secret",
    "sign_query",
]
