"""
Safety Advice

Fixed recommendations for each risk level. Advice is selected, never generated.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from .models import RiskLevel

ADVICE: Mapping[RiskLevel, Tuple[str, ...]] = MappingProxyType({
    RiskLevel.SEVERE: (
        "⚠️ IMMEDIATE EVACUATION RECOMMENDED",
        "Move to higher ground immediately",
        "Avoid walking or driving through flood waters",
        "Keep emergency supplies ready (food, water, medicines)",
        "Stay tuned to local weather updates",
        "Contact local disaster management authorities",
    ),
    RiskLevel.HIGH: (
        "High flood risk detected - prepare for possible evacuation",
        "Move valuable items to higher floors",
        "Charge electronic devices and keep flashlights ready",
        "Avoid low-lying areas and river banks",
        "Keep important documents in waterproof containers",
        "Monitor weather forecasts regularly",
    ),
    RiskLevel.MODERATE: (
        "Moderate flood risk - stay alert",
        "Prepare emergency kit with essentials",
        "Clear drainage around your property",
        "Avoid unnecessary travel during heavy rain",
        "Keep emergency contact numbers handy",
        "Stay informed about weather conditions",
    ),
    RiskLevel.LOW: (
        "Low flood risk currently",
        "Continue normal activities with caution",
        "Keep basic emergency supplies ready",
        "Stay updated with weather forecasts",
        "Ensure proper drainage maintenance",
    ),
})

_missing = set(RiskLevel) - set(ADVICE)
if _missing:
    raise RuntimeError(f"No advice defined for: {sorted(level.value for level in _missing)}")


def advice_for(level: RiskLevel) -> Tuple[str, ...]:
    """Return the recommendations for a risk level"""
    return ADVICE[level]
