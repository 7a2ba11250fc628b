"""
Configuration

Runtime settings for the FloodGuard API and dashboard, read from the environment.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    """Environment-driven settings"""

    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Plausible air temperature range accepted at the input boundary
    min_temperature_c: float = -60.0
    max_temperature_c: float = 60.0

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from FLOODGUARD_* environment variables"""
        defaults = cls()

        try:
            settings = cls(
                log_level=os.getenv("FLOODGUARD_LOG_LEVEL", defaults.log_level).upper(),
                cors_origins=_split_csv(os.getenv("FLOODGUARD_CORS_ORIGINS", "*")),
                api_host=os.getenv("FLOODGUARD_API_HOST", defaults.api_host),
                api_port=int(os.getenv("FLOODGUARD_API_PORT", defaults.api_port)),
                min_temperature_c=float(
                    os.getenv("FLOODGUARD_MIN_TEMPERATURE_C", defaults.min_temperature_c)
                ),
                max_temperature_c=float(
                    os.getenv("FLOODGUARD_MAX_TEMPERATURE_C", defaults.max_temperature_c)
                ),
            )
        except ValueError as e:
            raise ValueError(f"Invalid FLOODGUARD_* environment setting: {e}") from e

        if settings.min_temperature_c > settings.max_temperature_c:
            raise ValueError(
                f"FLOODGUARD_MIN_TEMPERATURE_C ({settings.min_temperature_c}) "
                f"exceeds FLOODGUARD_MAX_TEMPERATURE_C ({settings.max_temperature_c})"
            )

        return settings


@lru_cache()
def get_settings() -> Settings:
    """Return the process-wide settings, applying the configured log level"""
    settings = Settings.from_env()
    logging.getLogger().setLevel(settings.log_level)
    logger.debug(f"Loaded settings: {settings}")
    return settings
