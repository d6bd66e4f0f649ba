"""Shared fixtures for the geocoding client tests."""

from __future__ import annotations

import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Iterator, List

import pytest

from google_geocoder.config import GeocodingConfig, reset_config
from google_geocoder.container import reset_geocoder

INFINITE_LOOP_RESPONSE = {
    "results": [
        {
            "formatted_address": "1 Infinite Loop",
            "geometry": {"location": {"Lat": 37.33, "Lng": -122.03}},
        }
    ]
}


class StubTransport:
    """Transport returning a canned body and recording each query string."""

    def __init__(self, body: bytes = b'{"results": []}') -> None:
        self.body = body
        self.queries: List[str] = []

    def request(self, query_string: str) -> bytes:
        self.queries.append(query_string)
        return self.body


class MockEndpoint:
    """Local HTTP server answering every GET with a fixed JSON body."""

    def __init__(self, body: bytes) -> None:
        self.body = body
        self.paths: List[str] = []
        endpoint = self

        class Handler(BaseHTTPRequestHandler):
            def do_GET(self) -> None:  # noqa: N802
                endpoint.paths.append(self.path)
                self.send_response(200)
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(len(endpoint.body)))
                self.end_headers()
                self.wfile.write(endpoint.body)

            def log_message(self, format: str, *args: object) -> None:
                pass

        self._server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)

    @property
    def url(self) -> str:
        host, port = self._server.server_address[:2]
        return f"http://{host}:{port}/maps/api/geocode/json"

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self._server.shutdown()
        self._server.server_close()


@pytest.fixture(autouse=True)
def _fresh_state() -> Iterator[None]:
    reset_config()
    reset_geocoder()
    yield
    reset_config()
    reset_geocoder()


@pytest.fixture
def geo_config() -> GeocodingConfig:
    """Configuration independent of GOOGLE_GEO_* environment variables."""
    return GeocodingConfig(api_key="", client_id="", secret_key="", timeout_seconds=5)


@pytest.fixture
def stub_transport() -> StubTransport:
    """Transport answering with the Infinite Loop response by default."""
    return StubTransport(json.dumps(INFINITE_LOOP_RESPONSE).encode("utf-8"))


@pytest.fixture
def mock_endpoint(monkeypatch: pytest.MonkeyPatch) -> Iterator[MockEndpoint]:
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("NO_PROXY", "127.0.0.1,localhost")
    monkeypatch.setenv("no_proxy", "127.0.0.1,localhost")

    endpoint = MockEndpoint(json.dumps(INFINITE_LOOP_RESPONSE).encode("utf-8"))
    endpoint.start()
    yield endpoint
    endpoint.stop()
