"""
Pydantic Read Models

Snapshots handed out by the service's lookup operations. They are built
from the internal records with ``from_attributes`` so callers never hold
a reference into the service's indexes.

Author: Khalil_Bannouri
Version: 1.0.0
"""

from pydantic import BaseModel, ConfigDict
from typing import List, Optional

from food_delivery.models import OrderStatus


# =============================================================================
# ORDER SCHEMAS
# =============================================================================

class OrderLineResponse(BaseModel):
    """Single line of an order."""
    model_config = ConfigDict(from_attributes=True)

    dish_name: Optional[str]
    quantity: Optional[int]


class OrderResponse(BaseModel):
    """Response schema for a single order."""
    model_config = ConfigDict(from_attributes=True)

    number: int
    customer_name: str
    restaurant_name: str
    lines: List[OrderLineResponse]
    delivery_time: int
    delivery_distance: int
    status: OrderStatus
    assigned: bool
    total_quantity: int


# =============================================================================
# SERVICE SCHEMAS
# =============================================================================

class ServiceSummary(BaseModel):
    """Counts describing the current contents of a service."""
    categories: int
    restaurants: int
    dishes: int
    orders: int
    pending_orders: int
    assigned_orders: int
