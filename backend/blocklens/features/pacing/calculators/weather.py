"""
Weather slowdown.

Heat costs ~1.5% per 10°F above 55°F; humidity compounds it.
Display only: the result never feeds the fade model or the schedule.
"""

import math
from dataclasses import dataclass
from typing import Union

from blocklens.shared.constants import (
    HumidityLevel,
    HUMIDITY_MULTIPLIERS,
    OPTIMAL_TEMPERATURE_F,
    SLOWDOWN_PERCENT_PER_10F,
)


@dataclass(frozen=True)
class WeatherImpact:
    """Weather effect on a projected finish time."""
    temperature_f: float
    humidity: HumidityLevel
    adjustment: float           # fraction, 0.03 = 3% slower
    adjusted_finish_time: float
    time_added: float

    def to_dict(self) -> dict:
        return {
            "temperature_f": self.temperature_f,
            "humidity": self.humidity.value,
            "adjustment": round(self.adjustment, 4),
            "adjusted_finish_time": round(self.adjusted_finish_time, 2),
            "time_added": round(self.time_added, 2),
        }


def calculate_weather_adjustment(
    temperature_f: float,
    humidity: Union[HumidityLevel, str]
) -> float:
    """
    Calculate weather-based slowdown.

    Args:
        temperature_f: Race temperature in °F
        humidity: Humidity tier

    Returns:
        Slowdown as decimal (0.03 = 3% slower); 0 at or below 55°F

    Raises:
        ValueError: Temperature is NaN or infinite
    """
    if not math.isfinite(temperature_f):
        raise ValueError(f"Temperature must be a finite number, got {temperature_f}")
    degrees_above_optimal = max(0.0, temperature_f - OPTIMAL_TEMPERATURE_F)
    slowdown_percent = (degrees_above_optimal / 10) * SLOWDOWN_PERCENT_PER_10F
    slowdown_percent *= HUMIDITY_MULTIPLIERS[HumidityLevel(humidity)]
    return slowdown_percent / 100


def apply_weather(
    projected_finish_time: float,
    temperature_f: float,
    humidity: Union[HumidityLevel, str]
) -> WeatherImpact:
    """Apply weather slowdown to a finish time."""
    adjustment = calculate_weather_adjustment(temperature_f, humidity)
    adjusted = projected_finish_time * (1 + adjustment)
    return WeatherImpact(
        temperature_f=temperature_f,
        humidity=HumidityLevel(humidity),
        adjustment=adjustment,
        adjusted_finish_time=adjusted,
        time_added=adjusted - projected_finish_time,
    )
