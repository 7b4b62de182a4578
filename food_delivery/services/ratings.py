"""
Rating Rankings

Ordering helpers over restaurant averages. Only restaurants with a
strictly positive average take part in a ranking.
"""

from typing import Iterable, Optional

from food_delivery.core.config import MAX_RATING, MIN_RATING
from food_delivery.models import Restaurant


def accepts_rating(rating: int) -> bool:
    """Check whether a rating lies inside the accepted bounds."""
    return MIN_RATING <= rating <= MAX_RATING


def rank_by_average(restaurants: Iterable[Restaurant]) -> list[str]:
    """
    Rank restaurants by decreasing average rating.

    The sort is stable, so restaurants with equal averages keep the
    order in which ``restaurants`` yields them.

    Returns:
        Restaurant names, best average first
    """
    rated = [r for r in restaurants if r.average > 0.0]
    rated.sort(key=lambda r: r.average, reverse=True)
    return [r.name for r in rated]


def best_of(restaurants: Iterable[Restaurant]) -> Optional[str]:
    """
    Name of the restaurant with the highest average rating.

    A later restaurant only replaces the current best when its average
    is strictly greater, so ties go to the first one yielded.

    Returns:
        Restaurant name, or None when no restaurant averages above 0
    """
    best_name = None
    best_value = 0.0
    for restaurant in restaurants:
        if restaurant.average > best_value:
            best_value = restaurant.average
            best_name = restaurant.name
    return best_name
