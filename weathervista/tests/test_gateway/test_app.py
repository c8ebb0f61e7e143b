"""Tests for the gateway's FastAPI surface."""

from unittest.mock import MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient

from weathervista.config.schema import GatewayConfig
from weathervista.gateway.app import create_app
from weathervista.gateway.upstream import OpenWeatherClient, UpstreamConfigError


@pytest.fixture
def upstream() -> MagicMock:
    return MagicMock(spec=OpenWeatherClient)


@pytest.fixture
def client(upstream: MagicMock) -> TestClient:
    return TestClient(create_app(GatewayConfig(), upstream=upstream))


class TestWeatherRoute:
    def test_success(self, client, upstream, weather_payload):
        upstream.fetch.return_value = weather_payload
        resp = client.get("/weather", params={"city": "London", "endpoint": "weather"})
        assert resp.status_code == 200
        assert resp.json() == weather_payload
        assert resp.headers["access-control-allow-origin"] == "*"
        assert resp.headers["content-type"].startswith("application/json")

    def test_missing_params(self, client, upstream):
        resp = client.get("/weather", params={"city": "London"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Missing city or endpoint parameter"}
        assert "access-control-allow-origin" not in resp.headers
        upstream.fetch.assert_not_called()

    def test_invalid_endpoint(self, client, upstream):
        resp = client.get("/weather", params={"city": "London", "endpoint": "onecall"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid endpoint specified"}

    def test_upstream_404(self, client, upstream):
        upstream.fetch.return_value = {"cod": "404", "message": "city not found"}
        resp = client.get("/weather", params={"city": "Atlantis", "endpoint": "weather"})
        assert resp.status_code == 404
        assert resp.json() == {"error": "city not found"}

    def test_transport_failure(self, client, upstream):
        upstream.fetch.side_effect = httpx.ReadTimeout("timed out")
        resp = client.get("/weather", params={"city": "London", "endpoint": "forecast"})
        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to fetch weather data from external API"}

    def test_custom_route(self, upstream, weather_payload):
        upstream.fetch.return_value = weather_payload
        app = create_app(GatewayConfig(route="/.netlify/functions/weather"), upstream=upstream)
        resp = TestClient(app).get(
            "/.netlify/functions/weather", params={"city": "London", "endpoint": "weather"}
        )
        assert resp.status_code == 200


class TestAppFactory:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_missing_credential_fails_at_startup(self, monkeypatch):
        monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
        with pytest.raises(UpstreamConfigError):
            create_app(GatewayConfig())

    def test_credential_from_configured_env(self, monkeypatch):
        monkeypatch.setenv("WV_KEY", "abc")
        app = create_app(GatewayConfig(api_key_env="WV_KEY"))
        assert app.title == "WeatherVista Proxy Gateway"
