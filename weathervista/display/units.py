"""Temperature unit conversion for display."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (browser Math.round semantics)."""
    return math.floor(value + 0.5)


def c_to_f(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def convert_temp(temp_c: float, is_celsius: bool) -> int:
    """Display value of a metric (°C) temperature in the selected unit."""
    return round_half_up(temp_c if is_celsius else c_to_f(temp_c))


def unit_label(is_celsius: bool) -> str:
    return "°C" if is_celsius else "°F"
