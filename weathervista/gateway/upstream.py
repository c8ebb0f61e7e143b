"""OpenWeatherMap REST client holding the server-side credential."""

import logging
import os

import httpx

from weathervista.config.defaults import DEFAULT_API_KEY_ENV, OPENWEATHER_BASE_URL

logger = logging.getLogger(__name__)

REDACTED = "***"


class UpstreamConfigError(Exception):
    """Raised when the upstream credential is not configured."""


class SecretRedactor(logging.Filter):
    """Masks registered secrets in log records.

    httpx logs each request URL at INFO, and the upstream credential travels
    in the query string.
    """

    def __init__(self):
        super().__init__()
        self.secrets: set[str] = set()

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = message
        for secret in self.secrets:
            redacted = redacted.replace(secret, REDACTED)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True


_redactor = SecretRedactor()


def _hide_in_logs(secret: str) -> None:
    _redactor.secrets.add(secret)
    httpx_logger = logging.getLogger("httpx")
    if _redactor not in httpx_logger.filters:
        httpx_logger.addFilter(_redactor)


class OpenWeatherClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = OPENWEATHER_BASE_URL,
        units: str = "metric",
        timeout: float = 30.0,
        api_key_env: str = DEFAULT_API_KEY_ENV,
    ):
        self.api_key = api_key or os.environ.get(api_key_env, "")
        if not self.api_key:
            raise UpstreamConfigError(f"{api_key_env} not set")
        _hide_in_logs(self.api_key)
        self.base_url = base_url.rstrip("/")
        self.units = units
        self.timeout = timeout

    def fetch(self, path: str, city: str) -> dict:
        """GET ``{base_url}{path}`` for a city and return the decoded JSON object.

        The upstream body is returned whatever its ``cod`` says; callers
        decide what an upstream error means. Raises ``httpx.RequestError``
        on transport failure and ``ValueError`` if the body is not a JSON
        object.
        """
        url = f"{self.base_url}{path}"
        params = {"q": city, "appid": self.api_key, "units": self.units}
        resp = httpx.get(url, params=params, timeout=self.timeout)
        logger.debug("Upstream %s responded %d", path, resp.status_code)
        data = resp.json()
        if not isinstance(data, dict):
            raise ValueError(f"Expected JSON object from {path}, got {type(data).__name__}")
        return data
