"""
Risk Scoring Data Model

Value types shared by the assessor, the batch helpers and the outer surfaces.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class RiskLevel(str, Enum):
    """Flood risk category, ordered by severity"""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    SEVERE = "severe"

    @property
    def severity(self) -> int:
        return _SEVERITY_RANK[self]

    # str's lexical ordering would put "high" before "low"
    def __lt__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.severity < other.severity

    def __le__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.severity <= other.severity

    def __gt__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.severity > other.severity

    def __ge__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.severity >= other.severity


_SEVERITY_RANK = {
    RiskLevel.LOW: 0,
    RiskLevel.MODERATE: 1,
    RiskLevel.HIGH: 2,
    RiskLevel.SEVERE: 3,
}


@dataclass(frozen=True)
class WeatherObservation:
    """Rainfall over 24h, air temperature and relative humidity"""

    rainfall_mm: float
    temperature_c: float
    humidity_pct: float


@dataclass(frozen=True)
class FactorScores:
    """Points contributed by each factor; their sum is the risk score"""

    rainfall: int
    humidity: int
    temperature: int

    @property
    def total(self) -> int:
        return self.rainfall + self.humidity + self.temperature


@dataclass(frozen=True)
class PredictionResult:
    """
    Outcome of one assessment

    Attributes:
        risk_level: Category derived from risk_score
        risk_score: Sum of factor points, 0 to MAX_RISK_SCORE
        advice: Safety recommendations for risk_level, in display order
    """

    risk_level: RiskLevel
    risk_score: int
    advice: Tuple[str, ...]
