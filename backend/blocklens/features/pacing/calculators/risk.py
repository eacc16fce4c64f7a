"""
Fade risk classification.

Maps pacing deviation (sec/mile faster than sustainable) to a risk tier.
Threshold values belong to the lower tier.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from blocklens.shared.constants import (
    RiskLevel,
    RISK_THRESHOLD_LOW,
    RISK_THRESHOLD_MODERATE,
    RISK_THRESHOLD_HIGH,
)


@dataclass(frozen=True)
class RiskAssessment:
    """Risk tier with banner text."""
    level: RiskLevel
    color: str
    message: str

    def to_dict(self) -> dict:
        return {
            "level": self.level.value,
            "color": self.color,
            "message": self.message,
        }


RISK_ASSESSMENTS: Mapping[RiskLevel, RiskAssessment] = MappingProxyType({
    RiskLevel.CONSERVATIVE: RiskAssessment(
        RiskLevel.CONSERVATIVE, "blue", "Conservative start - may have time to spare"
    ),
    RiskLevel.LOW: RiskAssessment(
        RiskLevel.LOW, "green", "Low risk - slight positive split likely"
    ),
    RiskLevel.MODERATE: RiskAssessment(
        RiskLevel.MODERATE, "yellow", "Moderate risk - expect noticeable fade in final miles"
    ),
    RiskLevel.HIGH: RiskAssessment(
        RiskLevel.HIGH, "orange", "High risk - significant slowdown likely"
    ),
    RiskLevel.VERY_HIGH: RiskAssessment(
        RiskLevel.VERY_HIGH, "red", "Very high risk - blow-up territory"
    ),
})


def classify_risk_level(pacing_deviation: float) -> RiskLevel:
    if pacing_deviation <= 0:
        return RiskLevel.CONSERVATIVE
    if pacing_deviation <= RISK_THRESHOLD_LOW:
        return RiskLevel.LOW
    if pacing_deviation <= RISK_THRESHOLD_MODERATE:
        return RiskLevel.MODERATE
    if pacing_deviation <= RISK_THRESHOLD_HIGH:
        return RiskLevel.HIGH
    return RiskLevel.VERY_HIGH


def assess_fade_risk(pacing_deviation: float) -> RiskAssessment:
    """
    Assess fade risk based on pacing deviation.

    Args:
        pacing_deviation: Sec/mile faster than sustainable

    Returns:
        RiskAssessment with level, banner color and message
    """
    return RISK_ASSESSMENTS[classify_risk_level(pacing_deviation)]
