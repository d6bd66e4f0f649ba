"""HTTP transport adapter built on requests.

Performs one blocking GET per call with no retries. The endpoint is
owned by the instance; set_base_url() is meant to be called once,
before requests are issued from other threads, since the attribute is
read without locking.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import requests

from ...config import DEFAULT_BASE_URL
from ...domain.errors import ConfigurationError, TransportError


@dataclass
class RequestsTransport:
    """Transport implementing TransportPort with a requests.Session.

    Attributes:
        base_url: Endpoint URL the query string is appended to
        timeout_seconds: Request timeout, None for the client default
        session: HTTP session, created on construction if not given
    """

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: Optional[float] = None
    session: requests.Session = field(default_factory=requests.Session, repr=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self.set_base_url(self.base_url)

    def set_base_url(self, base_url: str) -> None:
        """Point subsequent requests at a different endpoint."""
        if not base_url or not base_url.strip():
            raise ConfigurationError(
                "Base URL must not be empty", setting_name="base_url"
            )
        self.base_url = base_url

    def request(self, query_string: str) -> bytes:
        """Send ``<base_url>?<query_string>`` and return the raw body.

        The query string is appended verbatim; any status code is
        accepted.

        Raises:
            TransportError: If the request cannot be built, sent or read.
        """
        base_url = self.base_url
        url = f"{base_url}?{query_string}"

        # Query strings carry keys and signatures, only the endpoint is logged
        self._logger.debug("Geocoding request", extra={"url": base_url})

        try:
            response = self.session.get(url, timeout=self.timeout_seconds)
            data = response.content
        except (requests.RequestException, ValueError) as e:
            self._logger.debug(
                "Geocoding request failed",
                extra={"url": base_url, "error": str(e)},
            )
            raise TransportError(
                "Geocoding request failed", cause=e, url=base_url
            ) from e

        self._logger.debug(
            "Geocoding response",
            extra={
                "url": base_url,
                "status_code": response.status_code,
                "bytes": len(data),
            },
        )
        return data

    def close(self) -> None:
        """Release the underlying HTTP connections."""
        self.session.close()

    def __enter__(self) -> RequestsTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
