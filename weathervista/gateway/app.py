"""Proxy gateway HTTP surface: a FastAPI app wrapping WeatherGateway."""

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from weathervista import __version__
from weathervista.config.schema import GatewayConfig
from weathervista.gateway.handler import WeatherGateway
from weathervista.gateway.upstream import OpenWeatherClient

logger = logging.getLogger(__name__)


def create_app(
    config: GatewayConfig | None = None,
    upstream: OpenWeatherClient | None = None,
) -> FastAPI:
    """Build the gateway app.

    The upstream client is resolved here, so a missing credential raises
    UpstreamConfigError at startup rather than on the first request.
    """
    config = config or GatewayConfig()
    if upstream is None:
        upstream = OpenWeatherClient(
            base_url=config.upstream_base_url,
            units=config.units,
            timeout=config.timeout_seconds,
            api_key_env=config.api_key_env,
        )
    gateway = WeatherGateway(upstream)

    app = FastAPI(title="WeatherVista Proxy Gateway", version=__version__)

    @app.get(config.route)
    def relay_weather(city: str | None = None, endpoint: str | None = None):
        """Relay a current-conditions or forecast query upstream."""
        result = gateway.handle(city, endpoint)
        return JSONResponse(
            result.body, status_code=result.status_code, headers=result.headers
        )

    @app.get("/health")
    def get_health():
        return {"status": "ok"}

    logger.info("Gateway routes ready: %s -> %s", config.route, config.upstream_base_url)
    return app


def serve(config: GatewayConfig) -> None:
    """Run the gateway with uvicorn until interrupted."""
    import uvicorn

    uvicorn.run(create_app(config), host=config.host, port=config.port)
