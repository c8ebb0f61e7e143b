"""Shared test fixtures."""

import json
import sqlite3
from pathlib import Path

import pytest

from weathervista.config.schema import ClientConfig
from weathervista.storage.database import open_storage
from weathervista.tests.fakes import GATEWAY_URL, forecast_payload

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def weather_payload() -> dict:
    with open(FIXTURE_DIR / "owm_weather_london.json") as f:
        return json.load(f)


@pytest.fixture
def not_found_payload() -> dict:
    with open(FIXTURE_DIR / "owm_not_found.json") as f:
        return json.load(f)


@pytest.fixture
def london_forecast() -> dict:
    return forecast_payload()


@pytest.fixture
def storage(tmp_path: Path) -> sqlite3.Connection:
    """A migrated local storage database in a temp directory."""
    conn = open_storage(tmp_path / "local.db")
    yield conn
    conn.close()


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(proxy_url=GATEWAY_URL, timeout_seconds=5.0)
