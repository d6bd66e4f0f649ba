"""Google Maps geocoder adapter.

All four public operations share one path:

    build query string -> authorize -> transport -> decode -> extract

Failures at any step propagate unchanged. Nothing is retried or cached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import quote_plus

from ...config import GeocodingConfig, get_config
from ...domain.errors import ConfigurationError, InvalidInputError
from ...domain.models import GeoLocation
from ...ports.auth import AuthStrategyPort
from ...ports.transport import TransportPort
from ..transport.requests_transport import RequestsTransport
from .auth import ApiKeyAuth, NoAuth, PremierAuth
from .response import ResponseEnvelope, decode_response, extract_address, extract_lat_lng


def _format_latlng(location: GeoLocation) -> str:
    return f"{location.latitude:f},{location.longitude:f}"


@dataclass
class GoogleGeocoderAdapter:
    """Geocoder facade implementing GeocoderPort against Google Maps.

    Attributes:
        config: Geocoding configuration
        transport: HTTP transport; a RequestsTransport on config.base_url
            is created when omitted
        auth: Credentials applied to geocode(); defaults to an API key
            from config.api_key, or none
    """

    config: GeocodingConfig = field(default_factory=lambda: get_config().geocoding)
    transport: Optional[TransportPort] = None
    auth: Optional[AuthStrategyPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.transport is None:
            self.transport = RequestsTransport(
                base_url=self.config.base_url,
                timeout_seconds=self.config.timeout_seconds,
            )
        if self.auth is None:
            self.auth = ApiKeyAuth(self.config.api_key) if self.config.api_key else NoAuth()

    def set_base_url(self, base_url: str) -> None:
        """Redirect subsequent requests to another endpoint (e.g. a mock).

        Raises:
            ConfigurationError: If the transport has no settable endpoint.
        """
        setter = getattr(self.transport, "set_base_url", None)
        if setter is None:
            raise ConfigurationError(
                "Transport does not support changing the endpoint",
                setting_name="base_url",
            )
        setter(base_url)

    # ------------------------------------------------------------------
    # Shared request path
    # ------------------------------------------------------------------

    def _fetch(self, query_string: str, auth: AuthStrategyPort) -> ResponseEnvelope:
        authorized = auth.authorize(query_string, self.config.signing_path)
        data = self.transport.request(authorized)  # type: ignore[union-attr]
        return decode_response(data)

    def lookup_location(
        self, query_string: str, auth: Optional[AuthStrategyPort] = None
    ) -> GeoLocation:
        """Run a pre-encoded query and return the first result's location.

        Raises:
            TransportError, ParseError, ZeroResultsError, InvalidKeyError
        """
        envelope = self._fetch(query_string, auth or NoAuth())
        return extract_lat_lng(envelope)

    def lookup_address(
        self, query_string: str, auth: Optional[AuthStrategyPort] = None
    ) -> str:
        """Run a pre-encoded query and return the first formatted address.

        Raises:
            TransportError, ParseError, NoResultsError, InvalidKeyError
        """
        envelope = self._fetch(query_string, auth or NoAuth())
        return extract_address(envelope)

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def geocode(self, query: str) -> GeoLocation:
        """Geocode a free-text address.

        Args:
            query: Address text; percent-encoded here.

        Returns:
            Coordinates of the first match.

        Raises:
            TransportError: Network failure.
            ParseError: Malformed response.
            ZeroResultsError: Nothing matched.
        """
        query_string = f"address={quote_plus(query)}"
        if self.config.sensor_flag:
            query_string += "&sensor=false"

        self._logger.debug("Geocode", extra={"query": query})
        return self.lookup_location(query_string, self.auth)

    def reverse_geocode(self, location: GeoLocation, api_key: str = "") -> str:
        """Reverse geocode coordinates to a formatted address.

        Args:
            location: Coordinates to look up.
            api_key: Optional API key; omitted from the request when empty.

        Raises:
            TransportError: Network failure.
            ParseError: Malformed response.
            NoResultsError: Nothing matched; carries the service status.
        """
        query_string = f"language={self.config.language}&latlng={_format_latlng(location)}"

        self._logger.debug(
            "Reverse geocode",
            extra={"lat": location.latitude, "lon": location.longitude},
        )
        return self.lookup_address(query_string, ApiKeyAuth(api_key))

    def geocode_premier(self, address: str, client_id: str, secret_key: str) -> GeoLocation:
        """Geocode an address with a signed premier request.

        Raises:
            InvalidInputError: Empty address; no request is sent.
            InvalidKeyError: Secret is not base64; no request is sent.
            TransportError, ParseError, ZeroResultsError
        """
        if not address:
            raise InvalidInputError("Address is empty", field_name="address")

        query_string = f"language={self.config.language}&address={quote_plus(address)}"

        self._logger.debug(
            "Premier geocode",
            extra={"query": address, "client_id": client_id},
        )
        return self.lookup_location(query_string, PremierAuth(client_id, secret_key))

    def reverse_geocode_premier(
        self, location: GeoLocation, client_id: str, secret_key: str
    ) -> str:
        """Reverse geocode coordinates with a signed premier request.

        Raises:
            InvalidKeyError: Secret is not base64; no request is sent.
            TransportError, ParseError, NoResultsError
        """
        query_string = f"language={self.config.language}&latlng={_format_latlng(location)}"

        self._logger.debug(
            "Premier reverse geocode",
            extra={
                "lat": location.latitude,
                "lon": location.longitude,
                "client_id": client_id,
            },
        )
        return self.lookup_address(query_string, PremierAuth(client_id, secret_key))
