"""
Mile-by-mile schedule with fade applied.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Union

from blocklens.shared.constants import RaceKey, get_race_distance
from .fade import FadeModel
from .pace import calculate_start_pace, pacing_deviation


@dataclass(frozen=True)
class Segment:
    """One mile of the schedule (the last one may be partial)."""
    mile: int
    distance_miles: float
    pace: float                 # sec/mile, start pace + fade
    segment_time: float         # seconds
    cumulative_time: float      # seconds
    fade_penalty: float         # sec/mile

    @property
    def is_partial(self) -> bool:
        return self.distance_miles < 1.0

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        return {
            "mile": self.mile,
            "distance_miles": round(self.distance_miles, 2),
            "pace": round(self.pace, 2),
            "segment_time": round(self.segment_time, 2),
            "cumulative_time": round(self.cumulative_time, 2),
            "fade_penalty": round(self.fade_penalty, 2),
        }


def generate_segments(
    goal_race: Union[RaceKey, str],
    sustainable_pace: float,
    pacing_adjustment: float,
    fade_model: Optional[FadeModel] = None
) -> List[Segment]:
    """
    Build the per-mile schedule for a goal race.

    Args:
        goal_race: Race being planned
        sustainable_pace: Sec/mile the runner can hold
        pacing_adjustment: Sec/mile offset at the start (negative = faster)
        fade_model: Fade model (default constants if None)

    Returns:
        ceil(distance) segments with strictly increasing cumulative time

    Raises:
        ValueError: Start pace is not positive
    """
    fade_model = fade_model or FadeModel()
    distance = get_race_distance(goal_race).miles

    start_pace = calculate_start_pace(sustainable_pace, pacing_adjustment)
    if not (math.isfinite(start_pace) and start_pace > 0):
        raise ValueError(
            f"Start pace must be positive, got {start_pace:.1f} sec/mile"
        )
    deviation = pacing_deviation(sustainable_pace, start_pace)

    segments: List[Segment] = []
    cumulative_time = 0.0

    for mile in range(1, math.ceil(distance) + 1):
        # Last ordinal of 26.2 is 27 -> fraction slightly above 1
        race_fraction = mile / distance
        if mile > distance:
            mile_distance = distance - math.floor(distance)
        else:
            mile_distance = 1.0

        fade_penalty = fade_model.calculate_penalty(deviation, race_fraction)
        actual_pace = start_pace + fade_penalty
        segment_time = actual_pace * mile_distance
        cumulative_time += segment_time

        segments.append(Segment(
            mile=mile,
            distance_miles=mile_distance,
            pace=actual_pace,
            segment_time=segment_time,
            cumulative_time=cumulative_time,
            fade_penalty=fade_penalty,
        ))

    return segments
