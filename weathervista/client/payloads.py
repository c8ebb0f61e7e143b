"""Parse relayed upstream JSON into weather models.

Malformed payloads raise one of PAYLOAD_ERRORS.
"""

from weathervista.models.weather import (
    Condition,
    CurrentConditions,
    ForecastCollection,
    ForecastSample,
)

PAYLOAD_ERRORS = (KeyError, TypeError, IndexError, ValueError, AttributeError)


def parse_condition(raw: list[dict]) -> Condition:
    first = raw[0]
    return Condition(
        main=str(first["main"]),
        description=str(first.get("description", "")),
        icon=str(first.get("icon", "")),
    )


def parse_current_conditions(payload: dict) -> CurrentConditions:
    main = payload["main"]
    sys = payload.get("sys", {})
    return CurrentConditions(
        name=str(payload.get("name", "")),
        country=str(sys.get("country", "")),
        dt=int(payload["dt"]),
        temp=float(main["temp"]),
        feels_like=float(main.get("feels_like", main["temp"])),
        humidity=int(main.get("humidity", 0)),
        condition=parse_condition(payload["weather"]),
        wind_speed=float(payload.get("wind", {}).get("speed", 0.0)),
        sunrise=int(sys["sunrise"]),
        sunset=int(sys["sunset"]),
    )


def parse_forecast_sample(item: dict) -> ForecastSample:
    main = item["main"]
    temp = float(main["temp"])
    return ForecastSample(
        dt=int(item["dt"]),
        temp=temp,
        temp_min=float(main.get("temp_min", temp)),
        temp_max=float(main.get("temp_max", temp)),
        humidity=int(main.get("humidity", 0)),
        condition=parse_condition(item["weather"]),
    )


def parse_forecast(payload: dict) -> ForecastCollection:
    samples = [parse_forecast_sample(item) for item in payload["list"]]
    city = payload.get("city") or {}
    return ForecastCollection(samples=samples, city_name=str(city.get("name", "")))
