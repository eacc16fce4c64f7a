"""
Unit conversions.

Miles are the internal unit everywhere. Kilometers and Celsius exist
only for input remapping and display.
"""

from typing import Union

from .constants import MILES_TO_KM, UnitPreference


def miles_to_km(miles: float) -> float:
    """Convert distance from miles to km."""
    return miles * MILES_TO_KM


def km_to_miles(km: float) -> float:
    """Convert distance from km to miles."""
    return km / MILES_TO_KM


def pace_to_km(seconds_per_mile: float) -> float:
    """Convert pace from sec/mile to sec/km."""
    return seconds_per_mile / MILES_TO_KM


def pace_to_miles(seconds_per_km: float) -> float:
    """Convert pace from sec/km to sec/mile."""
    return seconds_per_km * MILES_TO_KM


def fahrenheit_to_celsius(temp_f: float) -> int:
    """Convert °F to °C, rounded to whole degrees."""
    return round((temp_f - 32) * 5 / 9)


def celsius_to_fahrenheit(temp_c: float) -> int:
    """Convert °C to °F, rounded to whole degrees."""
    return round(temp_c * 9 / 5 + 32)


def adjustment_for_unit(
    seconds_per_mile: float,
    unit: Union[UnitPreference, str]
) -> int:
    """
    Magnitude of a pacing adjustment in the display unit.

    Args:
        seconds_per_mile: Signed adjustment (negative = faster)
        unit: Display unit

    Returns:
        Whole seconds per display unit, always non-negative
    """
    magnitude = abs(seconds_per_mile)
    if UnitPreference(unit) == UnitPreference.KM:
        return round(pace_to_km(magnitude))
    return round(magnitude)
