"""Daily forecast reduction and date labels."""

from datetime import datetime, tzinfo

from weathervista.models.weather import DailyForecast, ForecastCollection

MAX_FORECAST_DAYS = 5
TODAY_LABEL = "Today"


def _local(timestamp: int, tz: tzinfo | None = None) -> datetime:
    """Epoch seconds as an aware datetime; ``tz=None`` means the system zone."""
    if tz is None:
        return datetime.fromtimestamp(timestamp).astimezone()
    return datetime.fromtimestamp(timestamp, tz)


def day_name(timestamp: int, tz: tzinfo | None = None) -> str:
    """Short weekday name, e.g. ``Mon``."""
    return _local(timestamp, tz).strftime("%a")


def format_date(timestamp: int, tz: tzinfo | None = None) -> str:
    """Long date, e.g. ``Monday, October 19, 2026``."""
    d = _local(timestamp, tz)
    return f"{d:%A}, {d:%B} {d.day}, {d.year}"


def daily_forecasts(
    collection: ForecastCollection,
    tz: tzinfo | None = None,
    max_days: int = MAX_FORECAST_DAYS,
) -> list[DailyForecast]:
    """One representative sample per calendar day.

    Keeps the first sample encountered for each local date, in first-seen
    order, capped at ``max_days``. The first day is labelled "Today", the
    rest by short weekday name.
    """
    firsts = {}
    for sample in collection.samples:
        day = _local(sample.dt, tz).date()
        if day not in firsts:
            firsts[day] = sample

    result = []
    for i, sample in enumerate(list(firsts.values())[:max_days]):
        label = TODAY_LABEL if i == 0 else day_name(sample.dt, tz)
        result.append(DailyForecast(label=label, sample=sample))
    return result
