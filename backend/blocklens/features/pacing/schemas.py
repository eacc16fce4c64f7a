"""
Pacing projection schemas.

Pydantic schemas for API request/response serialization and for the
raw input record a client may save between sessions.
"""

import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_snake

from blocklens.shared.constants import HumidityLevel, RaceKey, UnitPreference


logger = logging.getLogger(__name__)


# === Request Models ===

class PacingInputs(BaseModel):
    """
    Raw inputs for a projection, exactly as a user entered them.

    Times stay as text so a saved record can be restored verbatim and
    re-validated on every run.
    """
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    goal_race: RaceKey = RaceKey.MARATHON
    goal_time: str = "3:30:00"
    recent_race: RaceKey = RaceKey.HALF
    recent_time: str = "1:40:00"
    # sec/mile, negative = faster than sustainable
    pacing_adjustment: float = 0.0
    compare_mode: bool = False
    unit_preference: UnitPreference = UnitPreference.MILES
    weather_enabled: bool = False
    temperature: float = Field(default=55.0, description="Temperature in °F")
    humidity: HumidityLevel = HumidityLevel.MODERATE

    @classmethod
    def from_saved(
        cls,
        raw: Union[str, bytes, Mapping[str, Any], None]
    ) -> "PacingInputs":
        """
        Restore a saved input record, merged over the defaults.

        Unreadable records give the defaults; fields that no longer
        validate are dropped individually. camelCase keys (goalRace,
        pacingAdjustment, ...) map to their snake_case fields.
        """
        if raw is None:
            return cls()

        if isinstance(raw, (str, bytes)):
            try:
                saved = json.loads(raw)
            except ValueError:
                logger.warning("Saved inputs are not valid JSON, using defaults")
                return cls()
        else:
            saved = raw

        if not isinstance(saved, Mapping):
            logger.warning(f"Saved inputs must be an object, got {type(saved).__name__}")
            return cls()

        saved = {to_snake(str(k)): v for k, v in saved.items()}
        if saved and not saved.keys() & cls.model_fields.keys():
            logger.warning(f"Saved inputs have no known fields: {sorted(saved)}")

        defaults = cls().model_dump()
        try:
            return cls.model_validate({**defaults, **saved})
        except ValidationError as e:
            bad_fields = {err["loc"][0] for err in e.errors() if err["loc"]}
            logger.warning(f"Dropping invalid saved fields: {sorted(map(str, bad_fields))}")
            cleaned = {k: v for k, v in saved.items() if k not in bad_fields}
            return cls.model_validate({**defaults, **cleaned})


class ValidateTimeRequest(BaseModel):
    """Request to validate a time string."""
    time: Optional[str] = None


# === Response Models ===

class ValidateTimeResponse(BaseModel):
    """Validation result: seconds when valid, error otherwise."""
    valid: bool
    seconds: Optional[int] = None
    error: Optional[str] = None


class SegmentSchema(BaseModel):
    """Single schedule row."""
    mile: int
    distance_miles: float
    pace: float
    segment_time: float
    cumulative_time: float
    fade_penalty: float


class RiskSchema(BaseModel):
    """Fade risk banner."""
    level: str
    color: str
    message: str


class ProjectionSchema(BaseModel):
    """Projection for one pacing adjustment."""
    pacing_adjustment: float
    sustainable_pace: float
    goal_pace: float
    start_pace: float
    goal_distance_miles: float
    pacing_deviation: float
    segments: List[SegmentSchema]
    projected_finish_time: float
    time_delta: float
    risk: RiskSchema


class ComparisonSchema(BaseModel):
    """Aggressive/conservative scenarios around the current adjustment."""
    offset: float
    aggressive: ProjectionSchema
    conservative: ProjectionSchema


class WeatherSchema(BaseModel):
    """Weather effect on the projected finish."""
    temperature_f: float
    humidity: HumidityLevel
    adjustment: float = Field(..., description="Slowdown fraction")
    adjusted_finish_time: float
    time_added: float


class ChartPointSchema(BaseModel):
    """Chart point for one mile."""
    mile: int
    pace: float
    aggressive: Optional[float] = None
    conservative: Optional[float] = None


class ChartSchema(BaseModel):
    """Pace chart series."""
    points: List[ChartPointSchema]
    sustainable_pace: float
    y_min: float
    y_max: float


class SummarySchema(BaseModel):
    """Formatted summary for display in the selected unit."""
    projected_finish: str
    time_delta: str
    start_pace: str
    sustainable_pace: str
    goal_pace: str
    distance: str


class PacingReportResponse(BaseModel):
    """Full projection response."""
    goal_race: RaceKey
    recent_race: RaceKey
    unit_preference: UnitPreference
    summary: SummarySchema
    projection: ProjectionSchema
    chart: ChartSchema
    comparisons: Optional[ComparisonSchema] = None
    weather: Optional[WeatherSchema] = None


class RaceDistanceSchema(BaseModel):
    """Race distance table entry."""
    key: RaceKey
    label: str
    miles: float
    km: float


class FadeModelInfo(BaseModel):
    """Fade model constants and example penalties."""
    model: str
    aggression_multiplier: float
    onset_fraction: float
    max_penalty: float
    example_penalties: Dict[str, float]
