"""
In-Memory Domain Models

Records owned by the delivery service:
- Restaurants with their category and accumulated ratings
- Dishes sold by exactly one restaurant
- Orders with their lines, delivery slot and assignment status

Back-references (dish -> restaurant, order -> restaurant) are stored as
restaurant names and resolved through the service's restaurant index.

Author: Khalil_Bannouri
Version: 1.0.0
"""

import enum
import logging
from dataclasses import dataclass, field
from itertools import zip_longest
from typing import Optional, Sequence

from food_delivery.core.exceptions import DeliveryError, ErrorCode

logger = logging.getLogger(__name__)


class OrderStatus(str, enum.Enum):
    """Order assignment workflow."""
    PENDING = "pending"
    ASSIGNED = "assigned"


@dataclass
class Restaurant:
    """
    A named seller belonging to one category.

    Attributes:
        name: Unique restaurant name
        category: Name of a registered category, fixed at creation
        ratings: Accepted ratings in the order they were given
    """
    name: str
    category: str
    ratings: list[int] = field(default_factory=list)

    def add_rating(self, rating: int) -> None:
        self.ratings.append(rating)

    @property
    def average(self) -> float:
        """Arithmetic mean of the ratings, 0.0 when there are none."""
        if not self.ratings:
            return 0.0
        return sum(self.ratings) / len(self.ratings)

    def __repr__(self):
        return f"<Restaurant {self.name} - {self.category} - avg {self.average:.2f}>"


@dataclass(frozen=True)
class Dish:
    """A priced menu item of a single restaurant."""
    name: str
    price: float
    restaurant_name: str


@dataclass(frozen=True)
class OrderLine:
    """Quantity of one dish inside an order. Either side is None when unmatched."""
    dish_name: Optional[str]
    quantity: Optional[int]


@dataclass
class Order:
    """
    A customer request for dishes from one restaurant.

    Attributes:
        number: Progressive order number, unique per service
        lines: Ordered (dish, quantity) pairs
        customer_name: Who placed the order
        restaurant_name: Restaurant the order is placed with
        delivery_time: Requested delivery hour
        delivery_distance: Delivery distance in kilometers
        status: PENDING until a scheduling round picks the order
    """
    number: int
    lines: tuple[OrderLine, ...]
    customer_name: str
    restaurant_name: str
    delivery_time: int
    delivery_distance: int
    status: OrderStatus = OrderStatus.PENDING

    @classmethod
    def from_sequences(
        cls,
        number: int,
        dish_names: Sequence[str],
        quantities: Sequence[int],
        customer_name: str,
        restaurant_name: str,
        delivery_time: int,
        delivery_distance: int,
    ) -> "Order":
        """
        Build an order from parallel dish-name and quantity sequences.

        Entries are paired by position. When the sequences have different
        lengths the unmatched tail of the longer one is kept, paired with None.
        """
        if len(dish_names) != len(quantities):
            logger.warning(
                f"Order #{number}: {len(dish_names)} dish names but "
                f"{len(quantities)} quantities, unmatched entries padded with None"
            )
        lines = tuple(
            OrderLine(dish_name=name, quantity=qty)
            for name, qty in zip_longest(dish_names, quantities)
        )
        return cls(
            number=number,
            lines=lines,
            customer_name=customer_name,
            restaurant_name=restaurant_name,
            delivery_time=delivery_time,
            delivery_distance=delivery_distance,
        )

    @property
    def assigned(self) -> bool:
        return self.status == OrderStatus.ASSIGNED

    @property
    def dish_names(self) -> list[Optional[str]]:
        return [line.dish_name for line in self.lines]

    @property
    def quantities(self) -> list[Optional[int]]:
        return [line.quantity for line in self.lines]

    @property
    def total_quantity(self) -> int:
        """Total number of items across all lines with a quantity."""
        return sum(line.quantity for line in self.lines if line.quantity is not None)

    def mark_assigned(self) -> None:
        """Move the order from PENDING to ASSIGNED. There is no way back."""
        if self.assigned:
            raise DeliveryError(
                f"Order #{self.number} is already assigned",
                ErrorCode.ALREADY_ASSIGNED,
            )
        self.status = OrderStatus.ASSIGNED

    def __repr__(self):
        return (
            f"<Order #{self.number} - {self.customer_name} - "
            f"{self.restaurant_name} - {self.status.value}>"
        )
