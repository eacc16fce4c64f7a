"""
Pacing Routes

Endpoints for pacing projections.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from blocklens.config import settings
from blocklens.features.pacing import (
    PacingInputs,
    PacingReportResponse,
    PacingService,
    TimeValidationError,
)
from blocklens.features.pacing.schemas import (
    FadeModelInfo,
    RaceDistanceSchema,
    ValidateTimeRequest,
    ValidateTimeResponse,
)
from blocklens.shared.constants import RACE_DISTANCES
from blocklens.shared.time_codec import TimeParsed, parse_time

logger = logging.getLogger(__name__)

router = APIRouter()


def get_pacing_service() -> PacingService:
    """Service configured from settings."""
    return PacingService(compare_offset=settings.compare_offset_sec_per_mile)


@router.get("/races", response_model=List[RaceDistanceSchema])
async def list_races():
    """Supported race distances."""
    return [
        RaceDistanceSchema(key=key, label=race.label, miles=race.miles, km=race.km)
        for key, race in RACE_DISTANCES.items()
    ]


@router.post("/validate-time", response_model=ValidateTimeResponse)
async def validate_time(request: ValidateTimeRequest):
    """
    Validate a time string (M:SS or H:MM:SS).

    Always 200: the body says whether the time is valid and why not.
    """
    result = parse_time(request.time)
    if isinstance(result, TimeParsed):
        return ValidateTimeResponse(valid=True, seconds=result.seconds)
    return ValidateTimeResponse(valid=False, error=result.error)


@router.post("/project", response_model=PacingReportResponse)
async def project(
    inputs: PacingInputs,
    service: PacingService = Depends(get_pacing_service)
):
    """
    Project a race from a recent performance and a pacing adjustment.

    Returns summary, mile-by-mile schedule, fade risk and chart series.
    With compare_mode, adds aggressive/conservative scenarios.
    With weather_enabled, adds the weather slowdown on the finish time.
    """
    try:
        report = service.build_report(inputs)
    except TimeValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={"field": e.field, "error": e.message}
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(
        f"Projected {inputs.recent_race.value}->{inputs.goal_race.value} "
        f"adj={inputs.pacing_adjustment:+.0f}: risk={report.projection.risk.level.value}"
    )
    return report.to_dict()


@router.get("/fade-model", response_model=FadeModelInfo)
async def fade_model_info(service: PacingService = Depends(get_pacing_service)):
    """Fade model constants with example penalties."""
    return service.get_fade_info()
