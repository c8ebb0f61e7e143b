"""Stateless relay between the dashboard and the upstream weather API.

Validates the query, maps the logical endpoint to an upstream path,
forwards the request with the server-held credential attached and relays
the JSON body or a normalized ``{"error": ...}`` body. No retries, no
caching: every call is independent.
"""

import logging
from dataclasses import dataclass, field

import httpx

from weathervista.config.defaults import ENDPOINT_PATHS
from weathervista.gateway.upstream import OpenWeatherClient
from weathervista.models.common import Endpoint

logger = logging.getLogger(__name__)

MISSING_PARAMS_ERROR = "Missing city or endpoint parameter"
INVALID_ENDPOINT_ERROR = "Invalid endpoint specified"
NOT_FOUND_FALLBACK = "City not found"
UPSTREAM_FAILURE_ERROR = "Failed to fetch weather data from external API"

SUCCESS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
}


@dataclass(frozen=True)
class GatewayResponse:
    status_code: int
    body: dict
    headers: dict[str, str] = field(default_factory=dict)


def _error(status_code: int, message: str) -> GatewayResponse:
    return GatewayResponse(status_code=status_code, body={"error": message})


class WeatherGateway:
    def __init__(self, upstream: OpenWeatherClient):
        self.upstream = upstream

    def handle(self, city: str | None, endpoint: str | None) -> GatewayResponse:
        """Relay one weather query to the upstream provider."""
        if not city or not endpoint:
            return _error(400, MISSING_PARAMS_ERROR)

        try:
            path = ENDPOINT_PATHS[Endpoint(endpoint)]
        except ValueError:
            return _error(400, INVALID_ENDPOINT_ERROR)

        try:
            data = self.upstream.fetch(path, city)
            upstream_status = _upstream_status(data)
        except (httpx.RequestError, ValueError, TypeError) as e:
            logger.error("API fetch error for endpoint=%s: %s", endpoint, e)
            return _error(500, UPSTREAM_FAILURE_ERROR)

        if upstream_status is not None and upstream_status != 200:
            message = data.get("message") or NOT_FOUND_FALLBACK
            logger.warning(
                "Upstream %s returned cod=%d for city=%r: %s",
                endpoint, upstream_status, city, message,
            )
            return _error(upstream_status, message)

        return GatewayResponse(status_code=200, body=data, headers=dict(SUCCESS_HEADERS))


def _upstream_status(data: dict) -> int | None:
    """Status code carried in the payload's ``cod`` field.

    The current-weather endpoint sends an int, the forecast endpoint a
    string; both are normalized to int. A missing or falsy field means no
    status. Raises ValueError or TypeError if unparsable or not a valid
    HTTP status.
    """
    cod = data.get("cod")
    if not cod:
        return None
    status = int(cod)
    if not 100 <= status <= 599:
        raise ValueError(f"cod {cod!r} is not an HTTP status")
    return status
