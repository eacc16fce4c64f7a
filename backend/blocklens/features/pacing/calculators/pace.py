"""
Sustainable pace and pacing deviation.

All paces are seconds per mile.
"""

from typing import Union

from blocklens.shared.constants import RaceKey, get_race_distance
from blocklens.shared.formulas import predict_race_time


def calculate_sustainable_pace(
    recent_race: Union[RaceKey, str],
    recent_time_seconds: float,
    goal_race: Union[RaceKey, str]
) -> float:
    """
    Pace the runner's current fitness can hold over the goal distance.

    Projects the recent performance to the goal distance with Riegel's
    formula and divides by the goal distance. For a fixed recent race the
    result is strictly slower for longer goal races.

    Args:
        recent_race: Race of the recent performance
        recent_time_seconds: Finish time of the recent race
        goal_race: Race being planned

    Returns:
        Sustainable pace in sec/mile
    """
    recent_distance = get_race_distance(recent_race).miles
    goal_distance = get_race_distance(goal_race).miles

    predicted_time = predict_race_time(recent_time_seconds, recent_distance, goal_distance)
    return predicted_time / goal_distance


def calculate_start_pace(sustainable_pace: float, pacing_adjustment: float) -> float:
    """Start pace chosen by the runner (negative adjustment = faster)."""
    return sustainable_pace + pacing_adjustment


def pacing_deviation(sustainable_pace: float, start_pace: float) -> float:
    """
    Seconds/mile by which the start pace is faster than sustainable.

    Positive = aggressive start. Both the fade schedule and the risk
    classifier take their deviation from here.
    """
    return sustainable_pace - start_pace
