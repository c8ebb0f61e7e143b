"""UI state snapshot and the events that mutate it."""

from dataclasses import dataclass

from weathervista.models.weather import CurrentConditions, ForecastCollection


@dataclass(frozen=True)
class UIState:
    loading: bool = False
    error: str | None = None
    is_celsius: bool = True
    conditions: CurrentConditions | None = None
    forecast: ForecastCollection | None = None
    recent_cities: tuple[str, ...] = ()


@dataclass(frozen=True)
class SearchStarted:
    city: str


@dataclass(frozen=True)
class InputRejected:
    message: str


@dataclass(frozen=True)
class ConditionsReceived:
    conditions: CurrentConditions


@dataclass(frozen=True)
class ForecastReceived:
    forecast: ForecastCollection


@dataclass(frozen=True)
class SearchFailed:
    message: str


@dataclass(frozen=True)
class SearchFinished:
    pass


@dataclass(frozen=True)
class UnitToggled:
    pass


@dataclass(frozen=True)
class RecentCitiesChanged:
    cities: tuple[str, ...]


UIEvent = (
    SearchStarted
    | InputRejected
    | ConditionsReceived
    | ForecastReceived
    | SearchFailed
    | SearchFinished
    | UnitToggled
    | RecentCitiesChanged
)
