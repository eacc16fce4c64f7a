"""
Pacing Service

Orchestrates all pacing components:
- Sustainable pace from a recent race (Riegel)
- Mile-by-mile schedule with fade
- Fade risk assessment
- Aggressive/conservative comparison scenarios
- Weather slowdown (display only)

This is the main entry point for pacing projections.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from blocklens.shared.constants import (
    DEFAULT_COMPARE_OFFSET,
    RaceKey,
    UnitPreference,
    get_race_distance,
)
from blocklens.shared.formatters import (
    format_distance,
    format_duration,
    format_pace_with_unit,
    format_time_delta,
)
from blocklens.shared.time_codec import TimeInvalid, parse_time
from .calculators.fade import FadeModel
from .calculators.pace import (
    calculate_start_pace,
    calculate_sustainable_pace,
    pacing_deviation,
)
from .calculators.risk import RiskAssessment, assess_fade_risk
from .calculators.schedule import Segment, generate_segments
from .calculators.weather import WeatherImpact, apply_weather
from .chart import ChartSeries, build_chart_series
from .schemas import PacingInputs


logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================

class TimeValidationError(ValueError):
    """A time field could not be parsed."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


# =============================================================================
# Results
# =============================================================================

@dataclass(frozen=True)
class ProjectionResult:
    """Projection for one pacing adjustment."""
    goal_race: RaceKey
    pacing_adjustment: float
    sustainable_pace: float     # sec/mile
    goal_pace: float            # sec/mile needed for goal time
    start_pace: float           # sec/mile
    goal_distance_miles: float
    pacing_deviation: float     # sec/mile faster than sustainable
    segments: Tuple[Segment, ...]
    projected_finish_time: float
    time_delta: float           # positive = slower than goal
    risk: RiskAssessment

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        return {
            "pacing_adjustment": self.pacing_adjustment,
            "sustainable_pace": round(self.sustainable_pace, 2),
            "goal_pace": round(self.goal_pace, 2),
            "start_pace": round(self.start_pace, 2),
            "goal_distance_miles": self.goal_distance_miles,
            "pacing_deviation": round(self.pacing_deviation, 2),
            "segments": [s.to_dict() for s in self.segments],
            "projected_finish_time": round(self.projected_finish_time, 2),
            "time_delta": round(self.time_delta, 2),
            "risk": self.risk.to_dict(),
        }


@dataclass(frozen=True)
class ScenarioComparison:
    """Scenarios at ±offset around the current adjustment."""
    offset: float
    aggressive: ProjectionResult
    conservative: ProjectionResult

    def to_dict(self) -> dict:
        return {
            "offset": self.offset,
            "aggressive": self.aggressive.to_dict(),
            "conservative": self.conservative.to_dict(),
        }


@dataclass(frozen=True)
class PacingReport:
    """Everything the presentation layer renders for one set of inputs."""
    inputs: PacingInputs
    projection: ProjectionResult
    chart: ChartSeries
    comparisons: Optional[ScenarioComparison] = None
    weather: Optional[WeatherImpact] = None

    def summary(self) -> dict:
        """Formatted summary in the selected display unit."""
        unit = self.inputs.unit_preference
        p = self.projection
        return {
            "projected_finish": format_duration(p.projected_finish_time),
            "time_delta": format_time_delta(p.time_delta),
            "start_pace": format_pace_with_unit(p.start_pace, unit),
            "sustainable_pace": format_pace_with_unit(p.sustainable_pace, unit),
            "goal_pace": format_pace_with_unit(p.goal_pace, unit),
            "distance": format_distance(p.goal_distance_miles, unit),
        }

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        return {
            "goal_race": self.inputs.goal_race.value,
            "recent_race": self.inputs.recent_race.value,
            "unit_preference": self.inputs.unit_preference.value,
            "summary": self.summary(),
            "projection": self.projection.to_dict(),
            "chart": self.chart.to_dict(),
            "comparisons": self.comparisons.to_dict() if self.comparisons else None,
            "weather": self.weather.to_dict() if self.weather else None,
        }


# =============================================================================
# Service
# =============================================================================

class PacingService:
    """
    Main service for pacing projections.

    Every call is independent: the service holds only immutable
    configuration, so one instance can be shared freely.

    Example usage:
        service = PacingService()
        result = service.project(
            goal_race="marathon",
            goal_time_seconds=12600,
            recent_race="half",
            recent_time_seconds=6000,
            pacing_adjustment=-10,
        )
    """

    def __init__(
        self,
        compare_offset: float = DEFAULT_COMPARE_OFFSET,
        fade_model: Optional[FadeModel] = None,
    ):
        """
        Args:
            compare_offset: Sec/mile between current and comparison scenarios
            fade_model: Fade model (default constants if None)
        """
        if compare_offset <= 0:
            raise ValueError(f"Compare offset must be positive, got {compare_offset}")
        self.compare_offset = compare_offset
        self.fade_model = fade_model or FadeModel()

    def project(
        self,
        goal_race: Union[RaceKey, str],
        goal_time_seconds: float,
        recent_race: Union[RaceKey, str],
        recent_time_seconds: float,
        pacing_adjustment: float = 0.0,
    ) -> ProjectionResult:
        """
        Project a race for one pacing adjustment.

        Args:
            goal_race: Race being planned
            goal_time_seconds: Target finish time
            recent_race: Race of the recent performance
            recent_time_seconds: Recent finish time
            pacing_adjustment: Sec/mile offset at the start (negative = faster)

        Returns:
            ProjectionResult

        Raises:
            ValueError: Unknown race, non-positive or non-finite time or start pace
        """
        if not (math.isfinite(goal_time_seconds) and goal_time_seconds > 0):
            raise ValueError(f"Goal time must be positive, got {goal_time_seconds}")

        goal_distance = get_race_distance(goal_race).miles

        sustainable_pace = calculate_sustainable_pace(
            recent_race, recent_time_seconds, goal_race
        )
        goal_pace = goal_time_seconds / goal_distance

        segments = generate_segments(
            goal_race, sustainable_pace, pacing_adjustment, self.fade_model
        )
        projected_finish = sum(s.segment_time for s in segments)

        start_pace = calculate_start_pace(sustainable_pace, pacing_adjustment)
        deviation = pacing_deviation(sustainable_pace, start_pace)
        risk = assess_fade_risk(deviation)

        logger.debug(
            f"Projection {recent_race}->{goal_race} adj={pacing_adjustment:+.0f}: "
            f"sustainable={sustainable_pace:.1f}s/mi finish={projected_finish:.0f}s "
            f"risk={risk.level.value}"
        )

        return ProjectionResult(
            goal_race=RaceKey(goal_race),
            pacing_adjustment=pacing_adjustment,
            sustainable_pace=sustainable_pace,
            goal_pace=goal_pace,
            start_pace=start_pace,
            goal_distance_miles=goal_distance,
            pacing_deviation=deviation,
            segments=tuple(segments),
            projected_finish_time=projected_finish,
            time_delta=projected_finish - goal_time_seconds,
            risk=risk,
        )

    def compare(
        self,
        goal_race: Union[RaceKey, str],
        goal_time_seconds: float,
        recent_race: Union[RaceKey, str],
        recent_time_seconds: float,
        pacing_adjustment: float = 0.0,
    ) -> ScenarioComparison:
        """Project more aggressive and more conservative starts."""
        return ScenarioComparison(
            offset=self.compare_offset,
            aggressive=self.project(
                goal_race, goal_time_seconds, recent_race, recent_time_seconds,
                pacing_adjustment - self.compare_offset,
            ),
            conservative=self.project(
                goal_race, goal_time_seconds, recent_race, recent_time_seconds,
                pacing_adjustment + self.compare_offset,
            ),
        )

    def build_report(self, inputs: PacingInputs) -> PacingReport:
        """
        Validate raw inputs and build everything needed for display.

        Raises:
            TimeValidationError: goal_time or recent_time is not a valid time
        """
        goal_time_seconds = _require_time("goal_time", inputs.goal_time)
        recent_time_seconds = _require_time("recent_time", inputs.recent_time)

        args = (inputs.goal_race, goal_time_seconds, inputs.recent_race, recent_time_seconds)

        projection = self.project(*args, pacing_adjustment=inputs.pacing_adjustment)

        comparisons = None
        if inputs.compare_mode:
            comparisons = self.compare(*args, pacing_adjustment=inputs.pacing_adjustment)

        weather = None
        if inputs.weather_enabled:
            weather = apply_weather(
                projection.projected_finish_time, inputs.temperature, inputs.humidity
            )

        return PacingReport(
            inputs=inputs,
            projection=projection,
            chart=build_chart_series(projection, comparisons),
            comparisons=comparisons,
            weather=weather,
        )

    def get_fade_info(self) -> dict:
        return self.fade_model.get_info()


def _require_time(field: str, text: str) -> int:
    result = parse_time(text)
    if isinstance(result, TimeInvalid):
        raise TimeValidationError(field, result.error)
    return result.seconds


_default_service = PacingService()


def calculate_projection(
    goal_race: Union[RaceKey, str],
    goal_time_seconds: float,
    recent_race: Union[RaceKey, str],
    recent_time_seconds: float,
    pacing_adjustment: float = 0.0,
) -> ProjectionResult:
    """Project a race with default model constants."""
    return _default_service.project(
        goal_race, goal_time_seconds, recent_race, recent_time_seconds, pacing_adjustment
    )
