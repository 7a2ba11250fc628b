"""
Display helpers for risk results.
"""

from types import MappingProxyType
from typing import Mapping

from .models import RiskLevel
from .risk_assessor import MAX_RISK_SCORE

# Background colours for the risk card; severe uses the destructive red
RISK_COLORS: Mapping[RiskLevel, str] = MappingProxyType({
    RiskLevel.LOW: "#22c55e",
    RiskLevel.MODERATE: "#eab308",
    RiskLevel.HIGH: "#f97316",
    RiskLevel.SEVERE: "#dc2626",
})

# Text colour readable on each background
RISK_TEXT_COLORS: Mapping[RiskLevel, str] = MappingProxyType({
    RiskLevel.LOW: "#ffffff",
    RiskLevel.MODERATE: "#000000",
    RiskLevel.HIGH: "#ffffff",
    RiskLevel.SEVERE: "#ffffff",
})


def risk_color(level: RiskLevel) -> str:
    return RISK_COLORS[level]


def risk_text_color(level: RiskLevel) -> str:
    return RISK_TEXT_COLORS[level]


def format_score(risk_score: int) -> str:
    """Score label against the highest attainable score, e.g. "45/80" """
    return f"{risk_score}/{MAX_RISK_SCORE}"
