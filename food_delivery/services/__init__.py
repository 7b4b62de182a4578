"""
Delivery Service Factory

Provides a shared entry point for obtaining a service instance configured
from the environment.

Usage:
    from food_delivery.services import get_delivery_service

    service = get_delivery_service()
    service.add_category("Pizza")

Instances built directly with ``DeliveryService()`` are independent and
number their orders from the start; the factory always hands back the
same instance until ``reset_delivery_service()`` is called.
"""

import logging
from functools import lru_cache

from food_delivery.core.config import get_settings
from food_delivery.services.delivery_service import DeliveryService

logger = logging.getLogger(__name__)


@lru_cache()
def get_delivery_service() -> DeliveryService:
    """
    Get the shared delivery service instance.

    Returns:
        DeliveryService: Cached instance built from get_settings()
    """
    settings = get_settings()
    logger.info(
        f"Delivery Service: new instance ({settings.env_mode.value} mode)"
    )
    return DeliveryService(settings)


def reset_delivery_service() -> None:
    """
    Drop the shared service instance.

    The next call to get_delivery_service() creates an empty one.
    """
    get_delivery_service.cache_clear()
    logger.debug("Delivery service cache cleared")


__all__ = [
    "get_delivery_service",
    "reset_delivery_service",
    "DeliveryService",
]
