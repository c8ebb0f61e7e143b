"""Tests for the per-day forecast reduction."""

from datetime import UTC, timedelta, timezone

from weathervista.client.payloads import parse_forecast
from weathervista.display.forecast import daily_forecasts, day_name, format_date
from weathervista.models.weather import ForecastCollection
from weathervista.tests.fakes import DAY0, THREE_HOURS, forecast_payload


class TestDateLabels:
    def test_day_name(self):
        assert day_name(DAY0, UTC) == "Tue"

    def test_format_date(self):
        assert format_date(DAY0 + 12 * 3600, UTC) == "Tuesday, February 10, 2026"

    def test_timezone_shifts_date(self):
        tokyo = timezone(timedelta(hours=9))
        assert format_date(DAY0 + 20 * 3600, tokyo) == "Wednesday, February 11, 2026"


class TestDailyForecasts:
    def test_five_days_from_forty_samples(self):
        days = daily_forecasts(parse_forecast(forecast_payload()), UTC)
        assert [d.label for d in days] == ["Today", "Wed", "Thu", "Fri", "Sat"]

    def test_first_sample_of_each_day(self):
        days = daily_forecasts(parse_forecast(forecast_payload()), UTC)
        assert days[0].sample.dt == DAY0 + 9 * 3600
        assert days[1].sample.dt == DAY0 + 24 * 3600
        assert days[1].sample.temp == 6.25

    def test_partial_forecast(self):
        payload = forecast_payload(count=10)
        days = daily_forecasts(parse_forecast(payload), UTC)
        assert [d.label for d in days] == ["Today", "Wed"]

    def test_custom_cap(self):
        days = daily_forecasts(parse_forecast(forecast_payload()), UTC, max_days=3)
        assert len(days) == 3

    def test_first_seen_order(self):
        payload = forecast_payload(count=3)
        payload["list"].reverse()
        payload["list"].append(
            forecast_payload(start=DAY0 + 30 * THREE_HOURS, count=1)["list"][0]
        )
        days = daily_forecasts(parse_forecast(payload), UTC)
        assert days[0].sample.dt == DAY0 + 9 * 3600 + 2 * THREE_HOURS
        assert days[0].label == "Today"
        assert len(days) == 2

    def test_empty(self):
        assert daily_forecasts(ForecastCollection(samples=[]), UTC) == []
