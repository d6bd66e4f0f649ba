"""Ports layer - Abstract interfaces (Protocols) for the client.

Ports define the contracts between the geocoding facade and the
adapters that talk to the network and add credentials.
"""

from .auth import AuthStrategyPort
from .geocoding import GeocoderPort
from .transport import TransportPort

__all__ = [
    "AuthStrategyPort",
    "GeocoderPort",
    "TransportPort",
]
