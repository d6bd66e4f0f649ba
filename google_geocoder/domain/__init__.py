"""Domain layer - Core models and errors.

No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GeocoderError,
    InvalidInputError,
    InvalidKeyError,
    NoResultsError,
    ParseError,
    TransportError,
    ZeroResultsError,
)
from .models import GeoLocation

__all__ = [
    # Models
    "GeoLocation",
    # Errors
    "GeocoderError",
    "TransportError",
    "ParseError",
    "ZeroResultsError",
    "NoResultsError",
    "InvalidInputError",
    "InvalidKeyError",
    "ConfigurationError",
]
