"""
Core module initialization.
Exports configuration, logging utilities and the service error type.
"""

from food_delivery.core.config import get_settings, Settings, EnvironmentMode
from food_delivery.core.exceptions import DeliveryError

__all__ = ["get_settings", "Settings", "EnvironmentMode", "DeliveryError"]
