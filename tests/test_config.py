"""Tests for configuration, wiring and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from google_geocoder.adapters.geocoding import ApiKeyAuth, NoAuth, PremierAuth
from google_geocoder.adapters.transport import RequestsTransport
from google_geocoder.config import (
    DEFAULT_BASE_URL,
    AppConfig,
    GeocodingConfig,
    ObservabilityConfig,
    get_config,
    reset_config,
)
from google_geocoder.container import create_geocoder, get_geocoder, reset_geocoder
from google_geocoder.logging_setup import LOGGER_NAME, configure_logging


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "GOOGLE_GEO_BASE_URL",
        "GOOGLE_GEO_API_KEY",
        "GOOGLE_GEO_CLIENT_ID",
        "GOOGLE_GEO_SECRET_KEY",
        "GOOGLE_GEO_SENSOR_FLAG",
        "GOOGLE_GEO_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestConfig:
    def test_defaults(self, clean_env):
        config = GeocodingConfig()

        assert config.base_url == DEFAULT_BASE_URL
        assert config.signing_path == "/maps/api/geocode/json"
        assert config.language == "ja"
        assert config.sensor_flag is False
        assert config.timeout_seconds is None

    def test_environment_overrides(self, clean_env):
        clean_env.setenv("GOOGLE_GEO_BASE_URL", "http://localhost:8080/geocode")
        clean_env.setenv("GOOGLE_GEO_SENSOR_FLAG", "true")

        config = GeocodingConfig()

        assert config.base_url == "http://localhost:8080/geocode"
        assert config.sensor_flag is True

    def test_blank_base_url_is_rejected(self):
        with pytest.raises(ValidationError):
            GeocodingConfig(base_url="  ")

    def test_secret_is_hidden_from_repr(self):
        assert "s3cr3t" not in repr(GeocodingConfig(secret_key="s3cr3t"))

    def test_get_config_is_cached_until_reset(self, clean_env):
        first = get_config()
        assert get_config() is first

        reset_config()
        assert get_config() is not first


class TestContainer:
    def test_create_geocoder_wires_transport_from_config(self, clean_env):
        config = AppConfig(geocoding=GeocodingConfig(base_url="http://mock/geocode", timeout_seconds=2))

        geocoder = create_geocoder(config)

        assert isinstance(geocoder.transport, RequestsTransport)
        assert geocoder.transport.base_url == "http://mock/geocode"
        assert geocoder.transport.timeout_seconds == 2
        assert isinstance(geocoder.auth, NoAuth)

    def test_api_key_selects_key_auth(self, clean_env):
        config = AppConfig(geocoding=GeocodingConfig(api_key="k"))
        assert isinstance(create_geocoder(config).auth, ApiKeyAuth)

    def test_premier_credentials_take_precedence(self, clean_env):
        config = AppConfig(
            geocoding=GeocodingConfig(api_key="k", client_id="gme-test", secret_key="c2VjcmV0")
        )
        assert isinstance(create_geocoder(config).auth, PremierAuth)

    def test_custom_transport_is_used(self, stub_transport, clean_env):
        geocoder = create_geocoder(AppConfig(), transport=stub_transport)

        geocoder.geocode("Tokyo")

        assert stub_transport.queries == ["address=Tokyo"]

    def test_default_geocoder_is_shared_until_reset(self, clean_env):
        first = get_geocoder()
        assert get_geocoder() is first

        reset_geocoder()
        assert get_geocoder() is not first


class TestLogging:
    def test_configure_logging_sets_level_without_stacking_handlers(self):
        config = ObservabilityConfig(level="debug")

        configure_logging(config)
        logger = configure_logging(config)

        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        owned = [h for h in logger.handlers if getattr(h, "_google_geocoder", False)]
        assert len(owned) == 1

        for handler in owned:
            logger.removeHandler(handler)
