"""
Risk Assessment Module

Scores rainfall, humidity and temperature against a fixed band table and
classifies the total into a flood risk level with safety advice.
"""

from typing import Tuple
import logging

from .advice import advice_for
from .models import FactorScores, PredictionResult, RiskLevel, WeatherObservation

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# (threshold, points), highest threshold first; a value must exceed the threshold
Bands = Tuple[Tuple[float, int], ...]

RAINFALL_BANDS: Bands = ((200, 40), (150, 30), (100, 20), (50, 10))
HUMIDITY_BANDS: Bands = ((85, 25), (70, 15), (50, 5))
TEMPERATURE_BANDS: Bands = ((35, 15), (30, 10))

# (minimum score, level), highest first
LEVEL_THRESHOLDS: Tuple[Tuple[int, RiskLevel], ...] = (
    (70, RiskLevel.SEVERE),
    (50, RiskLevel.HIGH),
    (30, RiskLevel.MODERATE),
)

MAX_RISK_SCORE = RAINFALL_BANDS[0][1] + HUMIDITY_BANDS[0][1] + TEMPERATURE_BANDS[0][1]


def band_points(value: float, bands: Bands) -> int:
    """
    Points for the first band whose threshold the value exceeds

    Values matching no band, including negatives and NaN, score 0.
    """
    for threshold, points in bands:
        if value > threshold:
            return points
    return 0


def score_factors(
    rainfall_mm: float,
    temperature_c: float,
    humidity_pct: float
) -> FactorScores:
    """Per-factor points for one set of readings"""
    return FactorScores(
        rainfall=band_points(rainfall_mm, RAINFALL_BANDS),
        humidity=band_points(humidity_pct, HUMIDITY_BANDS),
        temperature=band_points(temperature_c, TEMPERATURE_BANDS),
    )


def classify(risk_score: int) -> RiskLevel:
    """Map a risk score to its level"""
    for minimum, level in LEVEL_THRESHOLDS:
        if risk_score >= minimum:
            return level
    return RiskLevel.LOW


def assess(
    rainfall_mm: float,
    temperature_c: float,
    humidity_pct: float
) -> PredictionResult:
    """
    Assess flood risk for one set of readings

    Args:
        rainfall_mm: Rainfall over the last 24 hours (mm)
        temperature_c: Air temperature (°C)
        humidity_pct: Relative humidity (%)

    Returns:
        PredictionResult with level, score (0-80) and advice

    Inputs are not validated here; readings outside every band contribute
    0 points. Use src.observations to reject bad input first.
    """
    factors = score_factors(rainfall_mm, temperature_c, humidity_pct)
    risk_score = factors.total
    risk_level = classify(risk_score)

    logger.debug(
        f"Assessed rainfall={rainfall_mm} temperature={temperature_c} "
        f"humidity={humidity_pct}: {factors} -> {risk_score} ({risk_level.value})"
    )

    return PredictionResult(
        risk_level=risk_level,
        risk_score=risk_score,
        advice=advice_for(risk_level),
    )


def assess_observation(observation: WeatherObservation) -> PredictionResult:
    """Assess a WeatherObservation"""
    return assess(
        observation.rainfall_mm,
        observation.temperature_c,
        observation.humidity_pct,
    )


if __name__ == "__main__":
    print("\n" + "="*60)
    print("FLOOD RISK ASSESSMENT")
    print("="*60 + "\n")

    samples = [
        ("Heavy monsoon", 250, 38, 90),
        ("Wet and warm", 120, 32, 75),
        ("Dry spell", 30, 25, 40),
    ]

    for name, rainfall, temperature, humidity in samples:
        factors = score_factors(rainfall, temperature, humidity)
        result = assess(rainfall, temperature, humidity)

        print(f"{name}: rainfall={rainfall}mm temperature={temperature}°C humidity={humidity}%")
        print(f"  Rainfall points:     {factors.rainfall}")
        print(f"  Humidity points:     {factors.humidity}")
        print(f"  Temperature points:  {factors.temperature}")
        print(f"  Risk Score:          {result.risk_score}/{MAX_RISK_SCORE}")
        print(f"  Risk Level:          {result.risk_level.value.upper()}")
        for item in result.advice:
            print(f"    - {item}")
        print()

    print("="*60)
