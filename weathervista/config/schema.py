"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from weathervista.config.defaults import (
    DEFAULT_API_KEY_ENV,
    DEFAULT_PROXY_URL,
    MAX_RECENT_CITIES,
    OPENWEATHER_BASE_URL,
)


class GatewayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    upstream_base_url: str = OPENWEATHER_BASE_URL
    units: str = "metric"
    api_key_env: str = DEFAULT_API_KEY_ENV
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    host: str = "127.0.0.1"
    port: int = Field(default=8888, ge=1, le=65535)
    route: str = "/weather"


class ClientConfig(BaseModel):
    model_config = {"extra": "forbid"}

    proxy_url: str = DEFAULT_PROXY_URL
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    storage_path: str = "data/weathervista.db"
    max_recent_cities: int = Field(default=MAX_RECENT_CITIES, ge=1)
    auto_load_last_city: bool = True


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    gateway: GatewayConfig = GatewayConfig()
    client: ClientConfig = ClientConfig()
