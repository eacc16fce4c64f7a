"""
Pace chart series.

One point per mile for the current projection, plus the aggressive and
conservative scenario paces when comparison mode is on.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .service import ProjectionResult, ScenarioComparison


Y_AXIS_PADDING_RATIO = 0.2
Y_AXIS_MIN_PADDING = 15.0   # sec/mile, used when all paces are equal
Y_AXIS_STEP = 5


@dataclass(frozen=True)
class ChartPoint:
    mile: int
    pace: float
    aggressive: Optional[float] = None
    conservative: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "mile": self.mile,
            "pace": round(self.pace, 2),
            "aggressive": round(self.aggressive, 2) if self.aggressive is not None else None,
            "conservative": round(self.conservative, 2) if self.conservative is not None else None,
        }


@dataclass(frozen=True)
class ChartSeries:
    points: Tuple[ChartPoint, ...] = ()
    sustainable_pace: float = 0.0
    y_min: float = 0.0
    y_max: float = 0.0

    def to_dict(self) -> dict:
        return {
            "points": [p.to_dict() for p in self.points],
            "sustainable_pace": round(self.sustainable_pace, 2),
            "y_min": self.y_min,
            "y_max": self.y_max,
        }


def _pace_at(projection: "ProjectionResult", index: int) -> Optional[float]:
    if index < len(projection.segments):
        return projection.segments[index].pace
    return None


def build_chart_series(
    projection: "ProjectionResult",
    comparisons: Optional["ScenarioComparison"] = None
) -> ChartSeries:
    """
    Build chart points and a padded y-axis domain.

    The domain covers every plotted pace and the sustainable pace line,
    padded by 20% of the range and snapped outward to 5-second steps.
    """
    points = []
    all_paces = [s.pace for s in projection.segments]
    all_paces.append(projection.sustainable_pace)

    for i, segment in enumerate(projection.segments):
        if comparisons:
            points.append(ChartPoint(
                mile=segment.mile,
                pace=segment.pace,
                aggressive=_pace_at(comparisons.aggressive, i),
                conservative=_pace_at(comparisons.conservative, i),
            ))
        else:
            points.append(ChartPoint(mile=segment.mile, pace=segment.pace))

    if comparisons:
        all_paces.extend(s.pace for s in comparisons.aggressive.segments)
        all_paces.extend(s.pace for s in comparisons.conservative.segments)

    min_pace = min(all_paces)
    max_pace = max(all_paces)
    padding = (max_pace - min_pace) * Y_AXIS_PADDING_RATIO or Y_AXIS_MIN_PADDING

    return ChartSeries(
        points=tuple(points),
        sustainable_pace=projection.sustainable_pace,
        y_min=math.floor((min_pace - padding) / Y_AXIS_STEP) * Y_AXIS_STEP,
        y_max=math.ceil((max_pace + padding) / Y_AXIS_STEP) * Y_AXIS_STEP,
    )
