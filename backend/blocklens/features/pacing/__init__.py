"""
Pacing projection module.

Usage:
    from blocklens.features.pacing import PacingService, PacingInputs
    from blocklens.features.pacing.calculators import FadeModel

Components:
- PacingService: Main projection service
- FadeModel: Late-race fade for aggressive starts
- build_chart_series: Chart points for one or three scenarios
"""

from .schemas import PacingInputs, PacingReportResponse
from .service import (
    PacingService,
    PacingReport,
    ProjectionResult,
    ScenarioComparison,
    TimeValidationError,
    calculate_projection,
)
from .chart import ChartPoint, ChartSeries, build_chart_series

__all__ = [
    # Schemas
    "PacingInputs",
    "PacingReportResponse",
    # Service
    "PacingService",
    "PacingReport",
    "ProjectionResult",
    "ScenarioComparison",
    "TimeValidationError",
    "calculate_projection",
    # Chart
    "ChartPoint",
    "ChartSeries",
    "build_chart_series",
]
