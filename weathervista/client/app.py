"""Client application: search orchestration over the UI state store."""

import logging
import random
import sqlite3
from collections.abc import Callable
from datetime import tzinfo

from weathervista.client import history
from weathervista.client.pipeline import FETCH_FAILED_ERROR, FetchPipeline
from weathervista.client.proxy_client import ProxyClient
from weathervista.client.store import Store
from weathervista.config.schema import ClientConfig
from weathervista.display.formatters import format_dashboard
from weathervista.display.theme import Backdrop
from weathervista.display.units import convert_temp
from weathervista.models.common import epoch_now
from weathervista.models.state import (
    ConditionsReceived,
    ForecastReceived,
    InputRejected,
    RecentCitiesChanged,
    SearchFailed,
    SearchFinished,
    SearchStarted,
    UIEvent,
    UIState,
    UnitToggled,
)

logger = logging.getLogger(__name__)

EMPTY_CITY_ERROR = "Please enter a city name"


class WeatherApp:
    """Owns the UI store, local storage handle, backdrop and fetch pipeline.

    All mutation goes through ``Store.dispatch`` from the event loop.
    Overlapping searches are resolved by generation: only the most recent
    call may touch state or storage once it resumes from a network await.
    """

    def __init__(
        self,
        config: ClientConfig,
        conn: sqlite3.Connection,
        proxy: ProxyClient | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] = epoch_now,
    ):
        self.config = config
        self.conn = conn
        self.pipeline = FetchPipeline(
            proxy or ProxyClient(config.proxy_url, timeout=config.timeout_seconds)
        )
        self.store = Store()
        self.backdrop = Backdrop(rng)
        self.clock = clock
        self._generation = 0
        self.store.subscribe(self._on_event)

    @property
    def state(self) -> UIState:
        return self.store.state

    def load(self) -> str | None:
        """Hydrate from local storage and fill the backdrop. Returns the last city."""
        cities = history.load_recent_cities(self.conn, self.config.max_recent_cities)
        self.store.dispatch(RecentCitiesChanged(tuple(cities)))
        self.backdrop.populate_all()
        return history.load_last_city(self.conn)

    async def start(self) -> None:
        """Startup sequence: hydrate, then re-show the last searched city."""
        last_city = self.load()
        if last_city and self.config.auto_load_last_city:
            logger.info("Restoring last searched city %r", last_city)
            await self.fetch_weather(last_city)

    async def fetch_weather(self, city: str) -> None:
        city = city.strip()
        if not city:
            self.store.dispatch(InputRejected(EMPTY_CITY_ERROR))
            return

        self._generation += 1
        generation = self._generation
        self.store.dispatch(SearchStarted(city))
        try:
            conditions = await self.pipeline.fetch_conditions(city)
            if self._is_stale(generation, city):
                return
            if not conditions.ok:
                self.store.dispatch(SearchFailed(conditions.error or FETCH_FAILED_ERROR))
                return
            self.store.dispatch(ConditionsReceived(conditions.data))

            forecast = await self.pipeline.fetch_forecast(city)
            if self._is_stale(generation, city):
                return
            if forecast.ok:
                self.store.dispatch(ForecastReceived(forecast.data))

            self._remember(city)
        finally:
            if generation == self._generation:
                self.store.dispatch(SearchFinished())

    def toggle_unit(self) -> None:
        self.store.dispatch(UnitToggled())

    def convert_temp(self, temp_c: float) -> int:
        return convert_temp(temp_c, self.state.is_celsius)

    def render(self, tz: tzinfo | None = None) -> str:
        return format_dashboard(self.state, self.backdrop, tz)

    def _is_stale(self, generation: int, city: str) -> bool:
        if generation != self._generation:
            logger.debug("Discarding superseded response for %r", city)
            return True
        return False

    def _remember(self, city: str) -> None:
        cities = history.update_recent_cities(
            self.state.recent_cities, city, self.config.max_recent_cities
        )
        self.store.dispatch(RecentCitiesChanged(tuple(cities)))
        history.save_recent_cities(self.conn, cities)
        history.save_last_city(self.conn, city)

    def _on_event(self, state: UIState, event: UIEvent) -> None:
        if isinstance(event, (ConditionsReceived, SearchFailed)):
            self.backdrop.apply(state.conditions, self.clock())
