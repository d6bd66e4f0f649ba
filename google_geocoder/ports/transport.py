"""Transport port - Abstraction for the HTTP round trip.

Implementation: adapters/transport/requests_transport.py
"""

from __future__ import annotations

from typing import Protocol


class TransportPort(Protocol):
    """Port for issuing a GET against the geocoding endpoint.

    The transport does not interpret HTTP status codes; the response
    envelope carries the service's own status.
    """

    def request(self, query_string: str) -> bytes:
        """Send ``<base_url>?<query_string>`` and return the raw body.

        Args:
            query_string: Pre-encoded query string, appended as-is.

        Returns:
            The complete response body.

        Raises:
            TransportError: If the request cannot be built, sent or read.
        """
        ...
