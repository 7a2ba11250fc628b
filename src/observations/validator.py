"""
Observation Validator

Checks raw readings before they reach the risk assessor, so that missing or
nonsensical input is reported instead of scoring as low risk.
"""

import math
import numbers
from dataclasses import dataclass
from typing import List, Optional, Union
import logging

from src.config import get_settings
from src.risk_scoring.models import WeatherObservation

from .regions import REGIONS, is_known_region

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

Number = Union[int, float]

FIELD_LABELS = {
    "region": "Region",
    "rainfall_mm": "Rainfall",
    "temperature_c": "Temperature",
    "humidity_pct": "Humidity",
}


@dataclass(frozen=True)
class ObservationError:
    """A single rejected field"""

    field: str
    message: str


class InvalidObservationError(ValueError):
    """Raised when one or more readings are rejected"""

    def __init__(self, errors: List[ObservationError]):
        self.errors = list(errors)
        summary = "; ".join(f"{e.field}: {e.message}" for e in self.errors)
        super().__init__(f"Invalid observation ({summary})")

    def to_list(self) -> List[dict]:
        return [{"field": e.field, "message": e.message} for e in self.errors]


def _check_rainfall(value: float) -> Optional[str]:
    if value < 0:
        return "Rainfall cannot be negative"
    return None


def _check_humidity(value: float) -> Optional[str]:
    if value < 0 or value > 100:
        return "Humidity must be between 0 and 100%"
    return None


def _check_temperature(value: float) -> Optional[str]:
    settings = get_settings()
    if value < settings.min_temperature_c or value > settings.max_temperature_c:
        return (
            f"Temperature must be between {settings.min_temperature_c:g} "
            f"and {settings.max_temperature_c:g}°C"
        )
    return None


_RANGE_CHECKS = {
    "rainfall_mm": _check_rainfall,
    "temperature_c": _check_temperature,
    "humidity_pct": _check_humidity,
}


def _number_errors(values: dict) -> List[ObservationError]:
    errors = []
    for name, value in values.items():
        label = FIELD_LABELS[name]
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            errors.append(ObservationError(name, f"{label} must be a number"))
            continue
        if not math.isfinite(value):
            errors.append(ObservationError(name, f"{label} must be a finite number"))
            continue
        message = _RANGE_CHECKS[name](value)
        if message:
            errors.append(ObservationError(name, message))
    return errors


def validate_observation(
    rainfall_mm: Number,
    temperature_c: Number,
    humidity_pct: Number
) -> WeatherObservation:
    """
    Validate numeric readings

    Returns:
        WeatherObservation with float fields

    Raises:
        InvalidObservationError: listing every rejected field
    """
    values = {
        "rainfall_mm": rainfall_mm,
        "temperature_c": temperature_c,
        "humidity_pct": humidity_pct,
    }
    errors = _number_errors(values)
    if errors:
        logger.info(f"Rejected observation {values}: {[e.message for e in errors]}")
        raise InvalidObservationError(errors)

    return WeatherObservation(
        rainfall_mm=float(rainfall_mm),
        temperature_c=float(temperature_c),
        humidity_pct=float(humidity_pct),
    )


def _parse_number(name: str, raw: Optional[str], errors: List[ObservationError]) -> Optional[float]:
    label = FIELD_LABELS[name]
    text = (raw or "").strip()
    if not text:
        errors.append(ObservationError(name, f"{label} is required"))
        return None
    try:
        return float(text)
    except ValueError:
        errors.append(ObservationError(name, f"{label} must be a number, got '{text}'"))
        return None


def parse_observation(
    rainfall: Optional[str],
    temperature: Optional[str],
    humidity: Optional[str]
) -> WeatherObservation:
    """
    Parse and validate readings typed into a form

    Blank and unparsable fields are rejected; parsed values then get the
    same checks as validate_observation. All problems are reported together.
    """
    errors: List[ObservationError] = []
    parsed = {
        "rainfall_mm": _parse_number("rainfall_mm", rainfall, errors),
        "temperature_c": _parse_number("temperature_c", temperature, errors),
        "humidity_pct": _parse_number("humidity_pct", humidity, errors),
    }

    errors.extend(_number_errors({k: v for k, v in parsed.items() if v is not None}))
    if errors:
        logger.info(f"Rejected form input: {[e.message for e in errors]}")
        raise InvalidObservationError(errors)

    return WeatherObservation(**parsed)


def validate_region(region: Optional[str]) -> str:
    """Return the region if it is in the catalogue"""
    name = (region or "").strip()
    if not name:
        raise InvalidObservationError([ObservationError("region", "Region is required")])
    if not is_known_region(name):
        raise InvalidObservationError([
            ObservationError("region", f"Unknown region '{name}'. Choose one of: {', '.join(REGIONS)}")
        ])
    return name
