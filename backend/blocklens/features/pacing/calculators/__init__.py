"""
Pacing calculators.

Components:
- calculate_sustainable_pace: Riegel projection to the goal distance
- FadeModel: Late-race penalty for aggressive starts
- generate_segments: Mile-by-mile schedule
- assess_fade_risk: Risk tier from pacing deviation
- calculate_weather_adjustment: Heat/humidity slowdown
"""

from .pace import calculate_sustainable_pace, calculate_start_pace, pacing_deviation
from .fade import (
    FadeModel,
    FadeModelConfig,
    calculate_fade_penalty,
    AGGRESSION_MULTIPLIER,
    FADE_ONSET_FRACTION,
    MAX_FADE_PENALTY,
)
from .schedule import Segment, generate_segments
from .risk import RiskAssessment, RISK_ASSESSMENTS, assess_fade_risk, classify_risk_level
from .weather import WeatherImpact, calculate_weather_adjustment, apply_weather

__all__ = [
    # Pace
    "calculate_sustainable_pace",
    "calculate_start_pace",
    "pacing_deviation",
    # Fade
    "FadeModel",
    "FadeModelConfig",
    "calculate_fade_penalty",
    "AGGRESSION_MULTIPLIER",
    "FADE_ONSET_FRACTION",
    "MAX_FADE_PENALTY",
    # Schedule
    "Segment",
    "generate_segments",
    # Risk
    "RiskAssessment",
    "RISK_ASSESSMENTS",
    "assess_fade_risk",
    "classify_risk_level",
    # Weather
    "WeatherImpact",
    "calculate_weather_adjustment",
    "apply_weather",
]
