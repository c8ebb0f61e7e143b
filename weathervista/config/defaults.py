"""Fixed values shared by the gateway and the client."""

from weathervista.models.common import Endpoint

# Upstream path segment per logical endpoint name
ENDPOINT_PATHS: dict[Endpoint, str] = {
    Endpoint.WEATHER: "/weather",
    Endpoint.FORECAST: "/forecast",
}

ICON_BASE_URL = "https://openweathermap.org/img/wn"

RECENT_CITIES_KEY = "recentCities"
LAST_CITY_KEY = "lastCity"

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
DEFAULT_API_KEY_ENV = "OPENWEATHER_API_KEY"
DEFAULT_PROXY_URL = "http://127.0.0.1:8888/weather"
MAX_RECENT_CITIES = 5
