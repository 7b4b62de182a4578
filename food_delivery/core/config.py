"""
Application Configuration Module

Business rules that define the service are fixed constants:
    - Ratings are integers between 0 and 5
    - Order numbering starts at 1 for every service instance

Operational settings come from environment variables with Pydantic
Settings. Each can be overridden with a ``DELIVERY_`` prefixed variable
or through a local ``.env`` file:
    - Environment mode and debug logging
    - The advisory delivery window (8 to 23), used only for warnings

Usage:
    from food_delivery.core.config import get_settings

    settings = get_settings()
    if settings.debug:
        # Verbose logging

Author: Khalil_Bannouri
Version: 1.0.0
"""

import logging
import sys
from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Ratings
MIN_RATING = 0
MAX_RATING = 5

# Order numbering
FIRST_ORDER_NUMBER = 1


class EnvironmentMode(str, Enum):
    """
    Application environment modes.

    Attributes:
        DEVELOPMENT: Local work and test runs
        PRODUCTION: Live deployment
        STAGING: Pre-production checks
    """
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    STAGING = "staging"


class Settings(BaseSettings):
    """
    Operational settings loaded from environment variables.

    Attributes:
        env_mode: Current environment (development/production/staging)
        debug: Enable verbose logging
        earliest_delivery_hour: First bookable delivery hour
        latest_delivery_hour: Last bookable delivery hour
    """

    model_config = SettingsConfigDict(
        env_prefix="DELIVERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # ENVIRONMENT
    # ==========================================================================

    env_mode: EnvironmentMode = Field(
        default=EnvironmentMode.DEVELOPMENT,
        description="Application environment mode"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging"
    )

    # ==========================================================================
    # DELIVERY WINDOW
    # ==========================================================================

    earliest_delivery_hour: int = Field(
        default=8,
        ge=0,
        le=23,
        description="First hour of the day a delivery can be booked for"
    )
    latest_delivery_hour: int = Field(
        default=23,
        ge=0,
        le=23,
        description="Last hour of the day a delivery can be booked for"
    )

    # ==========================================================================
    # VALIDATORS
    # ==========================================================================

    @field_validator("env_mode", mode="before")
    @classmethod
    def validate_env_mode(cls, v: str) -> EnvironmentMode:
        """Convert string to EnvironmentMode enum."""
        if isinstance(v, EnvironmentMode):
            return v
        try:
            return EnvironmentMode(v.lower())
        except ValueError:
            valid = [e.value for e in EnvironmentMode]
            raise ValueError(f"Invalid env_mode. Must be one of: {valid}")

    @model_validator(mode="after")
    def validate_window(self) -> "Settings":
        """Reject an inverted delivery window."""
        if self.earliest_delivery_hour > self.latest_delivery_hour:
            raise ValueError(
                f"earliest_delivery_hour ({self.earliest_delivery_hour}) is after "
                f"latest_delivery_hour ({self.latest_delivery_hour})"
            )
        return self

    def in_delivery_window(self, hour: int) -> bool:
        """Check whether an hour lies inside the bookable delivery window."""
        return self.earliest_delivery_hour <= hour <= self.latest_delivery_hour


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Uses LRU cache to ensure settings are loaded only once and stay
    consistent for every service created without explicit settings.

    Returns:
        Settings: Configured application settings

    Example:
        >>> settings = get_settings()
        >>> print(settings.latest_delivery_hour)
        23
    """
    return Settings()


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure application-wide logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Configured package logger
    """
    settings = get_settings()

    # Set level based on debug mode
    if settings.debug:
        level = logging.DEBUG

    log_format = "%(asctime)s │ %(levelname)-8s │ %(name)-25s │ %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt=date_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    return logging.getLogger("food_delivery")

