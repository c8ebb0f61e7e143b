"""Common types and helpers shared across models."""

import time
from enum import StrEnum


class Endpoint(StrEnum):
    WEATHER = "weather"
    FORECAST = "forecast"


def epoch_now() -> float:
    return time.time()
