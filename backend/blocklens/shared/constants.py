"""
Unified constants for races and projections.

This module provides a single source of truth for race distances,
model constants and display enums across the application.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union


class RaceKey(str, Enum):
    """
    Supported race distances.

    Used in:
    - Projection requests (goal race, recent race)
    - Saved input records
    """
    FIVE_K = "5k"
    TEN_K = "10k"
    HALF = "half"
    MARATHON = "marathon"


class UnitPreference(str, Enum):
    """Display unit. Internal values are always per mile."""
    MILES = "miles"
    KM = "km"


class HumidityLevel(str, Enum):
    """Humidity tier for weather adjustment."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class RiskLevel(str, Enum):
    """Fade risk tier, ordered from safest to riskiest."""
    CONSERVATIVE = "conservative"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very-high"

    @property
    def rank(self) -> int:
        return list(RiskLevel).index(self)


@dataclass(frozen=True)
class RaceDistance:
    """Reference distance for a race."""
    label: str
    miles: float
    km: float


RACE_DISTANCES: Mapping[RaceKey, RaceDistance] = MappingProxyType({
    RaceKey.FIVE_K: RaceDistance(label="5K", miles=3.1, km=5.0),
    RaceKey.TEN_K: RaceDistance(label="10K", miles=6.2, km=10.0),
    RaceKey.HALF: RaceDistance(label="Half Marathon", miles=13.1, km=21.1),
    RaceKey.MARATHON: RaceDistance(label="Marathon", miles=26.2, km=42.2),
})


def get_race_distance(race: Union[RaceKey, str]) -> RaceDistance:
    """
    Look up a race distance.

    Args:
        race: RaceKey or its string value ("5k", "10k", "half", "marathon")

    Raises:
        ValueError: Unknown race key
    """
    try:
        key = RaceKey(race)
    except ValueError:
        raise ValueError(f"Unknown race: {race!r}") from None
    return RACE_DISTANCES[key]


# Riegel fatigue exponent. Higher = more penalty for longer distances.
RIEGEL_EXPONENT = 1.06

MILES_TO_KM = 1.60934

# Risk bands, seconds/mile faster than sustainable (upper bound inclusive)
RISK_THRESHOLD_LOW = 5.0
RISK_THRESHOLD_MODERATE = 15.0
RISK_THRESHOLD_HIGH = 25.0

# Weather model
OPTIMAL_TEMPERATURE_F = 55.0
SLOWDOWN_PERCENT_PER_10F = 1.5

HUMIDITY_MULTIPLIERS: Mapping[HumidityLevel, float] = MappingProxyType({
    HumidityLevel.LOW: 1.0,
    HumidityLevel.MODERATE: 1.1,
    HumidityLevel.HIGH: 1.2,
})

# Comparison mode offset (sec/mile) for aggressive/conservative scenarios
DEFAULT_COMPARE_OFFSET = 10.0
