"""Wiring for the geocoding client.

Builds a GoogleGeocoderAdapter from configuration without any external
framework. Tests can pass their own transport instead of the default
requests-based one.
"""

from __future__ import annotations

import threading
from typing import Optional

from .adapters.geocoding import ApiKeyAuth, GoogleGeocoderAdapter, NoAuth, PremierAuth
from .adapters.transport import RequestsTransport
from .config import AppConfig, get_config
from .ports.auth import AuthStrategyPort
from .ports.transport import TransportPort


def default_auth(config: AppConfig) -> AuthStrategyPort:
    """Pick the authentication strategy the configuration asks for.

    Premier credentials win over an API key when both are set.
    """
    geo = config.geocoding
    if geo.client_id and geo.secret_key:
        return PremierAuth(geo.client_id, geo.secret_key)
    if geo.api_key:
        return ApiKeyAuth(geo.api_key)
    return NoAuth()


def create_geocoder(
    config: Optional[AppConfig] = None,
    transport: Optional[TransportPort] = None,
) -> GoogleGeocoderAdapter:
    """Create a geocoder with its transport and auth wired from config.

    Args:
        config: Optional configuration override.
        transport: Optional transport override (e.g. a stub in tests).

    Returns:
        A ready-to-use GoogleGeocoderAdapter.
    """
    config = config or get_config()
    if transport is None:
        transport = RequestsTransport(
            base_url=config.geocoding.base_url,
            timeout_seconds=config.geocoding.timeout_seconds,
        )
    return GoogleGeocoderAdapter(
        config=config.geocoding,
        transport=transport,
        auth=default_auth(config),
    )


# Global default geocoder (lazy initialized)
_default_geocoder: Optional[GoogleGeocoderAdapter] = None
_geocoder_lock = threading.Lock()


def get_geocoder() -> GoogleGeocoderAdapter:
    """Get the default geocoder (creates one if needed)."""
    global _default_geocoder
    if _default_geocoder is None:
        with _geocoder_lock:
            if _default_geocoder is None:
                _default_geocoder = create_geocoder()
    return _default_geocoder


def reset_geocoder() -> None:
    """Drop the default geocoder, closing its HTTP session.

    Call this in tests to ensure a fresh instance.
    """
    global _default_geocoder
    with _geocoder_lock:
        if _default_geocoder is not None:
            close = getattr(_default_geocoder.transport, "close", None)
            if close is not None:
                close()
        _default_geocoder = None
