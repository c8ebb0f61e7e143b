"""Async client for the WeatherVista proxy gateway."""

import logging

import httpx

from weathervista.config.defaults import DEFAULT_PROXY_URL
from weathervista.models.common import Endpoint

logger = logging.getLogger(__name__)


class ProxyClient:
    def __init__(self, proxy_url: str = DEFAULT_PROXY_URL, timeout: float = 30.0):
        self.proxy_url = proxy_url
        self.timeout = timeout

    async def get(self, city: str, endpoint: Endpoint) -> httpx.Response:
        """Issue one gateway query. Raises ``httpx.RequestError`` on transport failure."""
        params = {"city": city, "endpoint": endpoint.value}
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.get(self.proxy_url, params=params)
        logger.debug("Gateway %s for %r responded %d", endpoint, city, resp.status_code)
        return resp
