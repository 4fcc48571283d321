"""
Configuration settings for golquery

Values come from environment variables so the CLI and library share them.
"""

import logging
import os
from dataclasses import dataclass

from golquery.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

# Environment variable names
ENV_GOL_PATH = "GOLQUERY_GOL_PATH"
ENV_LOG_LEVEL = "GOLQUERY_LOG_LEVEL"
ENV_DEFAULT_RADIUS = "GOLQUERY_DEFAULT_RADIUS"


@dataclass
class Settings:
    """
    Runtime settings

    Attributes:
        gol_path: Default GOL file used when none is given
        log_level: Logging level name for the CLI
        default_radius_deg: Radius in degrees for center-point queries
    """

    gol_path: str | None = None
    log_level: str = "INFO"
    default_radius_deg: float = 0.01

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from GOLQUERY_* environment variables"""
        radius = os.environ.get(ENV_DEFAULT_RADIUS)
        if radius is not None:
            try:
                radius_deg = float(radius)
            except ValueError:
                raise ValidationError(
                    f"{ENV_DEFAULT_RADIUS} must be a number, got {radius!r}"
                ) from None
            if radius_deg <= 0:
                raise ValidationError(f"{ENV_DEFAULT_RADIUS} must be positive, got {radius_deg}")
        else:
            radius_deg = cls.default_radius_deg

        return cls(
            gol_path=os.environ.get(ENV_GOL_PATH) or None,
            log_level=os.environ.get(ENV_LOG_LEVEL, cls.log_level).upper(),
            default_radius_deg=radius_deg,
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the process-wide settings, reading the environment on first use"""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
        logger.debug("Loaded settings: %s", _settings)
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next get_settings() re-reads the environment"""
    global _settings
    _settings = None
