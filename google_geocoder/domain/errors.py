"""Typed errors for the geocoding client.

Every failure raised by the client is one of these types. Errors from
lower layers are never swallowed: they are wrapped and kept as ``cause``
so callers can tell a transport failure from a malformed response or
an empty result set.

All errors inherit from GeocoderError.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Tuple, Type


@dataclass
class GeocoderError(Exception):
    """Base error for the geocoding client.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __reduce__(self) -> Tuple[Any, ...]:
        # args only hold the message; rebuild from every dataclass field
        state = {f.name: getattr(self, f.name) for f in fields(self)}
        return (_rebuild_error, (type(self), state))


def _rebuild_error(cls: Type[GeocoderError], state: Dict[str, Any]) -> GeocoderError:
    return cls(**state)


@dataclass
class TransportError(GeocoderError):
    """The HTTP request could not be built, sent, or read.

    Attributes:
        url: Endpoint the request was sent to (without query string)
    """

    url: str = ""


@dataclass
class ParseError(GeocoderError):
    """The response body is not a valid geocoding envelope."""


@dataclass
class ZeroResultsError(GeocoderError):
    """Forward geocoding matched nothing.

    Carries no provider diagnostics; match on the type.
    """

    message: str = "ZERO_RESULTS"


@dataclass
class NoResultsError(GeocoderError):
    """Reverse geocoding returned no address.

    Attributes:
        status: Status string reported by the service
        error_message: Error message reported by the service, may be empty
    """

    status: str = ""
    error_message: str = ""

    @classmethod
    def from_envelope(cls, status: str, error_message: str) -> NoResultsError:
        return cls(
            message=f"Failed: ({status}) {error_message}",
            status=status,
            error_message=error_message,
        )


@dataclass
class InvalidInputError(GeocoderError):
    """A required argument was empty.

    Attributes:
        field_name: Name of the offending argument
    """

    field_name: str = ""


@dataclass
class InvalidKeyError(GeocoderError):
    """The signing secret is not valid standard base64."""


@dataclass
class ConfigurationError(GeocoderError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
