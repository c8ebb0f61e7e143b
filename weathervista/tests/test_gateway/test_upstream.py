"""Tests for the OpenWeatherMap client with mocked httpx."""

import httpx
import pytest
import respx

from weathervista.gateway.upstream import OpenWeatherClient, UpstreamConfigError

BASE = "https://owm.example.com/data/2.5"


@pytest.fixture
def owm() -> OpenWeatherClient:
    return OpenWeatherClient(api_key="secret-key-123", base_url=BASE)


class TestCredential:
    def test_missing_key_raises(self, monkeypatch):
        monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
        with pytest.raises(UpstreamConfigError, match="OPENWEATHER_API_KEY"):
            OpenWeatherClient()

    def test_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("OPENWEATHER_API_KEY", "env-key")
        assert OpenWeatherClient().api_key == "env-key"

    def test_custom_env_name(self, monkeypatch):
        monkeypatch.setenv("OWM_TOKEN", "other-key")
        assert OpenWeatherClient(api_key_env="OWM_TOKEN").api_key == "other-key"


class TestFetch:
    @respx.mock
    def test_success(self, owm: OpenWeatherClient, weather_payload: dict):
        route = respx.get(f"{BASE}/weather").mock(
            return_value=httpx.Response(200, json=weather_payload)
        )
        result = owm.fetch("/weather", "London")
        assert result["name"] == "London"
        assert route.call_count == 1

    @respx.mock
    def test_query_parameters(self, owm: OpenWeatherClient, weather_payload: dict):
        route = respx.get(f"{BASE}/forecast").mock(
            return_value=httpx.Response(200, json=weather_payload)
        )
        owm.fetch("/forecast", "New York")
        params = route.calls[0].request.url.params
        assert params["q"] == "New York"
        assert params["appid"] == "secret-key-123"
        assert params["units"] == "metric"

    @respx.mock
    def test_city_is_url_encoded(self, owm: OpenWeatherClient, weather_payload: dict):
        route = respx.get(f"{BASE}/weather").mock(
            return_value=httpx.Response(200, json=weather_payload)
        )
        owm.fetch("/weather", "São Paulo&units=imperial")
        request = route.calls[0].request
        assert request.url.params["q"] == "São Paulo&units=imperial"
        assert request.url.params.get_list("units") == ["metric"]

    @respx.mock
    def test_error_body_returned(self, owm: OpenWeatherClient, not_found_payload: dict):
        respx.get(f"{BASE}/weather").mock(
            return_value=httpx.Response(404, json=not_found_payload)
        )
        result = owm.fetch("/weather", "Atlantis")
        assert result == {"cod": "404", "message": "city not found"}

    @respx.mock
    def test_non_json_body(self, owm: OpenWeatherClient):
        respx.get(f"{BASE}/weather").mock(
            return_value=httpx.Response(502, text="<html>Bad Gateway</html>")
        )
        with pytest.raises(ValueError):
            owm.fetch("/weather", "London")

    @respx.mock
    def test_non_object_json(self, owm: OpenWeatherClient):
        respx.get(f"{BASE}/weather").mock(return_value=httpx.Response(200, json=[1, 2]))
        with pytest.raises(ValueError, match="JSON object"):
            owm.fetch("/weather", "London")

    @respx.mock
    def test_transport_error_propagates(self, owm: OpenWeatherClient):
        respx.get(f"{BASE}/weather").mock(side_effect=httpx.ConnectError("refused"))
        with pytest.raises(httpx.RequestError):
            owm.fetch("/weather", "London")
