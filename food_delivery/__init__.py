"""
                Food Delivery Bookkeeping Service

In-memory catalog and order book for a food-delivery platform:
categories, restaurants, dishes, customer orders and restaurant ratings,
all managed through a single facade.

Author: Khalil_Bannouri
Version: 1.0.0
License: MIT
"""

from food_delivery.core.exceptions import DeliveryError
from food_delivery.services.delivery_service import DeliveryService

__version__ = "1.0.0"
__author__ = "Khalil_Bannouri"

__all__ = ["DeliveryService", "DeliveryError"]
