"""
Risk Scoring Module

Rule-based flood risk assessment from rainfall, temperature and humidity.
"""

from .models import FactorScores, PredictionResult, RiskLevel, WeatherObservation
from .advice import ADVICE, advice_for
from .risk_assessor import (
    MAX_RISK_SCORE,
    assess,
    assess_observation,
    classify,
    score_factors,
)
from .batch import assess_frame, summarize
from .display import format_score, risk_color, risk_text_color

__all__ = [
    "ADVICE",
    "MAX_RISK_SCORE",
    "FactorScores",
    "PredictionResult",
    "RiskLevel",
    "WeatherObservation",
    "advice_for",
    "assess",
    "assess_frame",
    "assess_observation",
    "classify",
    "format_score",
    "risk_color",
    "risk_text_color",
    "score_factors",
    "summarize",
]
