"""
Delivery Scheduling

Selects which pending orders go out in a delivery round. Selection is
first-come first-served: orders are scanned by ascending order number
and the earliest matching ones win.
"""

from itertools import islice
from typing import Iterable

from food_delivery.models import Order


def is_deliverable(order: Order, delivery_time: int, max_distance: int) -> bool:
    """Check whether a pending order fits the requested slot and range."""
    return (
        not order.assigned
        and order.delivery_time == delivery_time
        and order.delivery_distance <= max_distance
    )


def select_orders(
    orders: Iterable[Order],
    delivery_time: int,
    max_distance: int,
    max_orders: int,
) -> list[Order]:
    """
    Pick the orders for one delivery round without changing them.

    Args:
        orders: Candidate orders, in any order
        delivery_time: Delivery hour the round is for (exact match)
        max_distance: Largest accepted delivery distance (inclusive)
        max_orders: Upper bound on the number of orders picked

    Returns:
        Matching orders in arrival order, at most ``max_orders`` of them
    """
    if max_orders <= 0:
        return []
    by_arrival = sorted(orders, key=lambda o: o.number)
    matching = (o for o in by_arrival if is_deliverable(o, delivery_time, max_distance))
    return list(islice(matching, max_orders))
