"""Weather data models parsed from upstream payloads."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Condition:
    main: str
    description: str
    icon: str


@dataclass(frozen=True)
class CurrentConditions:
    name: str
    country: str
    dt: int
    temp: float
    feels_like: float
    humidity: int
    condition: Condition
    wind_speed: float
    sunrise: int
    sunset: int


@dataclass(frozen=True)
class ForecastSample:
    dt: int
    temp: float
    temp_min: float
    temp_max: float
    humidity: int
    condition: Condition


@dataclass(frozen=True)
class ForecastCollection:
    samples: list[ForecastSample]
    city_name: str = ""


@dataclass(frozen=True)
class DailyForecast:
    label: str  # "Today" or short weekday name
    sample: ForecastSample
