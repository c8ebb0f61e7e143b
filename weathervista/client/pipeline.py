"""Two-step fetch pipeline: current conditions, then forecast.

Each step returns a StepResult instead of raising. The conditions step is
strict (its failure aborts the search); the forecast step is lenient (its
failure only means no forecast panel).
"""

import logging
from dataclasses import dataclass

import httpx

from weathervista.client.payloads import PAYLOAD_ERRORS, parse_current_conditions, parse_forecast
from weathervista.client.proxy_client import ProxyClient
from weathervista.models.common import Endpoint
from weathervista.models.weather import CurrentConditions, ForecastCollection

logger = logging.getLogger(__name__)

NOT_FOUND_OR_SERVER_ERROR = "City not found or server error"
FETCH_FAILED_ERROR = "Failed to fetch weather data"


@dataclass(frozen=True)
class StepResult:
    endpoint: Endpoint
    ok: bool
    data: CurrentConditions | ForecastCollection | None = None
    error: str | None = None


class FetchPipeline:
    def __init__(self, proxy: ProxyClient):
        self.proxy = proxy

    async def fetch_conditions(self, city: str) -> StepResult:
        endpoint = Endpoint.WEATHER
        try:
            resp = await self.proxy.get(city, endpoint)
        except httpx.RequestError as e:
            logger.warning("Gateway unreachable for %r: %s", city, e)
            return StepResult(endpoint, ok=False, error=FETCH_FAILED_ERROR)

        if not resp.is_success:
            message = _error_message(resp)
            logger.warning("Conditions for %r failed (%d): %s", city, resp.status_code, message)
            return StepResult(endpoint, ok=False, error=message)

        try:
            conditions = parse_current_conditions(resp.json())
        except PAYLOAD_ERRORS as e:
            logger.warning("Malformed conditions payload for %r: %s", city, e)
            return StepResult(endpoint, ok=False, error=FETCH_FAILED_ERROR)
        return StepResult(endpoint, ok=True, data=conditions)

    async def fetch_forecast(self, city: str) -> StepResult:
        endpoint = Endpoint.FORECAST
        try:
            resp = await self.proxy.get(city, endpoint)
            if not resp.is_success:
                logger.warning("Forecast for %r unavailable (%d)", city, resp.status_code)
                return StepResult(endpoint, ok=False, error=_error_message(resp))
            forecast = parse_forecast(resp.json())
        except httpx.RequestError as e:
            logger.warning("Forecast request for %r failed: %s", city, e)
            return StepResult(endpoint, ok=False, error=FETCH_FAILED_ERROR)
        except PAYLOAD_ERRORS as e:
            logger.warning("Malformed forecast payload for %r: %s", city, e)
            return StepResult(endpoint, ok=False, error=FETCH_FAILED_ERROR)
        return StepResult(endpoint, ok=True, data=forecast)


def _error_message(resp: httpx.Response) -> str:
    """Error text from a gateway ``{"error": ...}`` body, with a fallback."""
    try:
        body = resp.json()
    except ValueError:
        return NOT_FOUND_OR_SERVER_ERROR
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return NOT_FOUND_OR_SERVER_ERROR
