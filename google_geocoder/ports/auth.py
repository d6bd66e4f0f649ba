"""Authentication port - How a query string is authorized.

Implementations: adapters/geocoding/auth.py (NoAuth, ApiKeyAuth, PremierAuth)
"""

from __future__ import annotations

from typing import Protocol


class AuthStrategyPort(Protocol):
    """Port for adding credentials to an unsigned query string."""

    def authorize(self, query_string: str, signing_path: str) -> str:
        """Return the query string with credentials appended.

        Args:
            query_string: Unsigned, pre-encoded query string.
            signing_path: Endpoint path used by signing strategies.

        Returns:
            The query string to send.

        Raises:
            InvalidKeyError: If a signing secret cannot be decoded.
        """
        ...
