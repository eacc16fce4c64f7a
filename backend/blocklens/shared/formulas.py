"""
Mathematical formulas for race time projections.

Shared by the pacing calculators.
"""

import math

from .constants import RIEGEL_EXPONENT


def predict_race_time(
    known_time_seconds: float,
    known_distance_miles: float,
    target_distance_miles: float,
    exponent: float = RIEGEL_EXPONENT
) -> float:
    """
    Predict a race time at a new distance using Riegel's endurance formula.

    Formula: T2 = T1 * (D2 / D1) ^ 1.06

    Args:
        known_time_seconds: Finish time of the known performance
        known_distance_miles: Distance of the known performance
        target_distance_miles: Distance to predict
        exponent: Fatigue exponent (same for longer and shorter targets)

    Returns:
        Predicted time in seconds

    Raises:
        ValueError: Non-positive or non-finite time or distance

    Notes:
        - Exponent > 1 makes longer races proportionally slower
        - 20:00 5K -> ~41:42 10K (not 40:00)

    References:
        Riegel, P. (1981). Athletic Records and Human Endurance.
        American Scientist 69(3).
    """
    if not (math.isfinite(known_time_seconds) and known_time_seconds > 0):
        raise ValueError(f"Known time must be positive, got {known_time_seconds}")
    if not all(
        math.isfinite(d) and d > 0
        for d in (known_distance_miles, target_distance_miles)
    ):
        raise ValueError(
            f"Distances must be positive, got {known_distance_miles} -> {target_distance_miles}"
        )

    ratio = target_distance_miles / known_distance_miles
    return known_time_seconds * ratio ** exponent
