"""
Shared utilities (NOT business logic).

Usage:
    from blocklens.shared import parse_time, format_duration
    from blocklens.shared.constants import RaceKey, RACE_DISTANCES
"""
from .constants import (
    RaceKey,
    UnitPreference,
    HumidityLevel,
    RiskLevel,
    RaceDistance,
    RACE_DISTANCES,
    RIEGEL_EXPONENT,
    MILES_TO_KM,
    get_race_distance,
)
from .time_codec import (
    TimeParsed,
    TimeInvalid,
    ValidationResult,
    parse_time,
    time_to_seconds,
)
from .units import (
    miles_to_km,
    km_to_miles,
    pace_to_km,
    pace_to_miles,
    fahrenheit_to_celsius,
    celsius_to_fahrenheit,
    adjustment_for_unit,
)
from .formatters import (
    format_duration,
    format_pace,
    format_time_delta,
    format_pace_with_unit,
    format_distance,
    format_temperature,
    format_segment_label,
    format_fade,
)
from .formulas import predict_race_time

__all__ = [
    # constants
    "RaceKey",
    "UnitPreference",
    "HumidityLevel",
    "RiskLevel",
    "RaceDistance",
    "RACE_DISTANCES",
    "RIEGEL_EXPONENT",
    "MILES_TO_KM",
    "get_race_distance",
    # time codec
    "TimeParsed",
    "TimeInvalid",
    "ValidationResult",
    "parse_time",
    "time_to_seconds",
    # units
    "miles_to_km",
    "km_to_miles",
    "pace_to_km",
    "pace_to_miles",
    "fahrenheit_to_celsius",
    "celsius_to_fahrenheit",
    "adjustment_for_unit",
    # formatters
    "format_duration",
    "format_pace",
    "format_time_delta",
    "format_pace_with_unit",
    "format_distance",
    "format_temperature",
    "format_segment_label",
    "format_fade",
    # formulas
    "predict_race_time",
]
