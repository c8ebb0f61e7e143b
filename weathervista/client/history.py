"""Recent-search history persisted to client-local storage."""

import json
import logging
import sqlite3

from weathervista.config.defaults import LAST_CITY_KEY, MAX_RECENT_CITIES, RECENT_CITIES_KEY
from weathervista.storage import local_storage

logger = logging.getLogger(__name__)


def update_recent_cities(
    cities: list[str] | tuple[str, ...], city: str, limit: int = MAX_RECENT_CITIES
) -> list[str]:
    """Prepend ``city``, dropping any earlier occurrence, and cap the list."""
    return [city, *(c for c in cities if c != city)][:limit]


def load_recent_cities(conn: sqlite3.Connection, limit: int = MAX_RECENT_CITIES) -> list[str]:
    """Stored recent cities, deduplicated in order and capped at ``limit``."""
    raw = local_storage.get_item(conn, RECENT_CITIES_KEY)
    if raw is None:
        return []
    try:
        cities = json.loads(raw)
    except ValueError:
        logger.warning("Discarding unreadable %s value: %r", RECENT_CITIES_KEY, raw)
        return []
    if not isinstance(cities, list):
        logger.warning("Discarding non-list %s value: %r", RECENT_CITIES_KEY, raw)
        return []
    return list(dict.fromkeys(str(c) for c in cities))[:limit]


def save_recent_cities(conn: sqlite3.Connection, cities: list[str]) -> None:
    local_storage.set_item(conn, RECENT_CITIES_KEY, json.dumps(cities))


def load_last_city(conn: sqlite3.Connection) -> str | None:
    return local_storage.get_item(conn, LAST_CITY_KEY) or None


def save_last_city(conn: sqlite3.Connection, city: str) -> None:
    local_storage.set_item(conn, LAST_CITY_KEY, city)
