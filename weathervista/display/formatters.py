"""Text renderers for the dashboard, one per UI section."""

from datetime import tzinfo

from weathervista.config.defaults import ICON_BASE_URL
from weathervista.display.forecast import daily_forecasts, format_date
from weathervista.display.theme import Backdrop
from weathervista.display.units import convert_temp, unit_label
from weathervista.models.state import UIState
from weathervista.models.weather import CurrentConditions, ForecastCollection

APP_TITLE = "WeatherVista"
TAGLINE = "Experience weather like never before with dynamic backgrounds"
LOADING_TEXT = "Fetching weather data..."
ERROR_TITLE = "Oops! Something went wrong"


def icon_url(icon: str, scale: str = "4x") -> str:
    return f"{ICON_BASE_URL}/{icon}@{scale}.png"


def format_header() -> str:
    return f"{APP_TITLE}\n{TAGLINE}"


def format_recent_searches(cities: tuple[str, ...] | list[str]) -> str:
    """Recent searches row; empty when there is no history."""
    if not cities:
        return ""
    return "Recent: " + " | ".join(cities)


def format_loading() -> str:
    return LOADING_TEXT


def format_error(message: str) -> str:
    return f"{ERROR_TITLE}\n{message}"


def format_weather_card(
    c: CurrentConditions, is_celsius: bool, tz: tzinfo | None = None
) -> str:
    unit = unit_label(is_celsius)
    lines = [
        f"{c.name}, {c.country}",
        format_date(c.dt, tz),
        f"{convert_temp(c.temp, is_celsius)}{unit}  {c.condition.description}",
        f"Feels Like: {convert_temp(c.feels_like, is_celsius)}°",
        f"Humidity: {c.humidity}%",
        f"Wind Speed: {c.wind_speed} m/s",
        f"Icon: {icon_url(c.condition.icon)}",
    ]
    return "\n".join(lines)


def format_forecast_section(
    forecast: ForecastCollection, is_celsius: bool, tz: tzinfo | None = None
) -> str:
    lines = ["5-Day Forecast"]
    for day in daily_forecasts(forecast, tz):
        s = day.sample
        lines.append(
            f"  {day.label:<5} "
            f"{convert_temp(s.temp_max, is_celsius)}° / {convert_temp(s.temp_min, is_celsius)}°  "
            f"{s.condition.main}"
        )
    return "\n".join(lines)


def format_backdrop(backdrop: Backdrop) -> str:
    counts = ", ".join(
        f"{kind.value}={len(particles)}" for kind, particles in backdrop.layers.items()
    )
    return f"Theme: {backdrop.theme or 'default'} ({counts})"


def format_dashboard(
    state: UIState, backdrop: Backdrop | None = None, tz: tzinfo | None = None
) -> str:
    """Whole-screen view. The weather display is hidden while loading."""
    sections = [format_header()]
    recent = format_recent_searches(state.recent_cities)
    if recent:
        sections.append(recent)
    if state.loading:
        sections.append(format_loading())
    if state.error:
        sections.append(format_error(state.error))
    if state.conditions is not None and not state.loading:
        sections.append(format_weather_card(state.conditions, state.is_celsius, tz))
        if state.forecast is not None:
            sections.append(format_forecast_section(state.forecast, state.is_celsius, tz))
    if backdrop is not None:
        sections.append(format_backdrop(backdrop))
    return "\n\n".join(sections)
