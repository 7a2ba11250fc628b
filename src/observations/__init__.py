"""
Observation input for the FloodGuard platform

This package contains the boundary between raw user input and the risk assessor:
- Region catalogue shown in the input form
- Parsing and validation of rainfall, temperature and humidity readings
"""

from .regions import REGIONS, is_known_region
from .validator import (
    InvalidObservationError,
    ObservationError,
    parse_observation,
    validate_observation,
    validate_region,
)

__all__ = [
    "REGIONS",
    "InvalidObservationError",
    "ObservationError",
    "is_known_region",
    "parse_observation",
    "validate_observation",
    "validate_region",
]
