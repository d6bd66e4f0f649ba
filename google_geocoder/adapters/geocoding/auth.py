"""Authentication strategies - Implementations of AuthStrategyPort.

A strategy receives the unsigned query string and appends whatever
credentials its account type needs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import quote_plus

from .signing import sign_query


@dataclass(frozen=True)
class NoAuth:
    """Send the query string unchanged."""

    def authorize(self, query_string: str, signing_path: str) -> str:
        return query_string


@dataclass(frozen=True)
class ApiKeyAuth:
    """Append ``&key=<api_key>`` when a key is set.

    An empty key leaves the query string unchanged.
    """

    api_key: str = field(default="", repr=False)

    def authorize(self, query_string: str, signing_path: str) -> str:
        if not self.api_key:
            return query_string
        return f"{query_string}&key={quote_plus(self.api_key)}"


@dataclass(frozen=True)
class PremierAuth:
    """Append ``&client=<client_id>`` and an HMAC-SHA1 signature.

    Attributes:
        client_id: Premier client identifier, sent as-is
        secret_key: Standard base64 signing secret
    """

    client_id: str
    secret_key: str = field(repr=False)

    def authorize(self, query_string: str, signing_path: str) -> str:
        unsigned = f"{query_string}&client={self.client_id}"
        return sign_query(unsigned, signing_path, self.secret_key)
