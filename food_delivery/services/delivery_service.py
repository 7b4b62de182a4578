"""
Delivery Service Facade

Single entry point for the food-delivery catalog and order book.

Owns four indexes:
    - categories: category name -> restaurant names in that category
    - restaurants: restaurant name -> Restaurant record
    - dishes: restaurant name -> that restaurant's dishes
    - orders: order number -> Order record

Every index keeps registration order; name-sorted views are computed
when queried. All operations are synchronous and run to completion.

Usage:
    from food_delivery import DeliveryService

    service = DeliveryService()
    service.add_category("Pizza")
    service.add_restaurant("Da Michele", "Pizza")
    service.add_dish("Margherita", "Da Michele", 5.0)
    number = service.add_order(["Margherita"], [2], "Anna", "Da Michele", 20, 3)
    service.schedule_delivery(20, 5, 10)  # [number]

Author: Khalil_Bannouri
Version: 1.0.0
"""

import logging
from typing import Optional, Sequence

from food_delivery.core.config import FIRST_ORDER_NUMBER, Settings, get_settings
from food_delivery.core.exceptions import DeliveryError, ErrorCode
from food_delivery.models import Dish, Order, Restaurant
from food_delivery.schemas import OrderResponse, ServiceSummary
from food_delivery.services import ratings, scheduling

logger = logging.getLogger(__name__)


class DeliveryService:
    """
    In-memory bookkeeping for categories, restaurants, dishes and orders.

    Each instance numbers its own orders, starting from 1.

    Example:
        >>> service = DeliveryService()
        >>> service.add_category("Sushi")
        >>> service.get_categories()
        ['Sushi']
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize an empty service.

        Args:
            settings: Operational settings (default: get_settings())
        """
        self.settings = settings if settings is not None else get_settings()

        self._categories: dict[str, list[str]] = {}
        self._restaurants: dict[str, Restaurant] = {}
        self._dishes: dict[str, list[Dish]] = {}
        self._orders: dict[int, Order] = {}
        self._next_order_number = FIRST_ORDER_NUMBER

    # =========================================================================
    # INTERNAL HELPERS
    # =========================================================================

    def _fail(self, message: str, error_code: str) -> DeliveryError:
        logger.warning(f"Rejected: {message} ({error_code})")
        return DeliveryError(message, error_code)

    def _require_restaurant(self, name: str) -> Restaurant:
        restaurant = self._restaurants.get(name)
        if restaurant is None:
            raise self._fail(
                f"Restaurant '{name}' is not registered",
                ErrorCode.UNKNOWN_RESTAURANT,
            )
        return restaurant

    # =========================================================================
    # CATEGORIES
    # =========================================================================

    def add_category(self, name: str) -> None:
        """
        Register a new category.

        Raises:
            DeliveryError: If the category already exists
        """
        if name in self._categories:
            raise self._fail(
                f"Category '{name}' already exists",
                ErrorCode.DUPLICATE_CATEGORY,
            )
        self._categories[name] = []
        logger.info(f"Category registered: {name}")

    def get_categories(self) -> list[str]:
        """All category names, sorted ascending."""
        return sorted(self._categories)

    # =========================================================================
    # RESTAURANTS
    # =========================================================================

    def add_restaurant(self, name: str, category: str) -> None:
        """
        Register a restaurant under an existing category.

        Args:
            name: Unique restaurant name
            category: Name of a registered category

        Raises:
            DeliveryError: If the category is unknown or the name is taken
        """
        if category not in self._categories:
            raise self._fail(
                f"Category '{category}' is not registered",
                ErrorCode.UNKNOWN_CATEGORY,
            )
        if name in self._restaurants:
            raise self._fail(
                f"Restaurant '{name}' already exists",
                ErrorCode.DUPLICATE_RESTAURANT,
            )
        self._restaurants[name] = Restaurant(name=name, category=category)
        self._categories[category].append(name)
        self._dishes[name] = []
        logger.info(f"Restaurant registered: {name} ({category})")

    def get_restaurants_for_category(self, category: str) -> list[str]:
        """
        Restaurant names of a category, sorted ascending.

        Unknown or empty categories give an empty list.
        """
        names = self._categories.get(category)
        if not names:
            logger.debug(f"No restaurants for category '{category}'")
            return []
        return sorted(names)

    def get_restaurant_category(self, name: str) -> str:
        """
        Category a restaurant was registered under.

        Raises:
            DeliveryError: If the restaurant is unknown
        """
        return self._require_restaurant(name).category

    # =========================================================================
    # DISHES
    # =========================================================================

    def add_dish(self, dish_name: str, restaurant_name: str, price: float) -> None:
        """
        Add a dish to a restaurant's menu.

        Args:
            dish_name: Name, unique within the restaurant
            restaurant_name: Registered restaurant selling the dish
            price: Price of the dish

        Raises:
            DeliveryError: If the restaurant is unknown or already sells
                a dish with this name
        """
        self._require_restaurant(restaurant_name)
        menu = self._dishes[restaurant_name]
        if any(d.name == dish_name for d in menu):
            raise self._fail(
                f"Dish '{dish_name}' already sold by '{restaurant_name}'",
                ErrorCode.DUPLICATE_DISH,
            )
        menu.append(Dish(name=dish_name, price=price, restaurant_name=restaurant_name))
        logger.info(f"Dish added: {dish_name} @ {restaurant_name} ({price:.2f})")

    def get_dishes_for_restaurant(self, restaurant_name: str) -> list[str]:
        """
        Dish names of a restaurant, sorted ascending.

        Unknown restaurants or empty menus give an empty list.
        """
        return sorted(d.name for d in self._dishes.get(restaurant_name, []))

    def get_dishes_by_category(self, category: str) -> list[str]:
        """
        All dish names sold by restaurants of a category.

        Restaurants are visited in registration order and each menu in
        insertion order. Unknown categories give an empty list.
        """
        return [
            dish.name
            for restaurant_name in self._categories.get(category, [])
            for dish in self._dishes[restaurant_name]
        ]

    def get_dishes_by_price(self, min_price: float, max_price: float) -> dict[str, list[str]]:
        """
        Dishes priced within [min_price, max_price], grouped by restaurant.

        Args:
            min_price: Lowest price (inclusive)
            max_price: Highest price (inclusive)

        Returns:
            Restaurant name -> dish names in menu order. Keys are sorted
            ascending; restaurants without a match are left out.
        """
        result: dict[str, list[str]] = {}
        for restaurant_name in sorted(self._dishes):
            matching = [
                d.name for d in self._dishes[restaurant_name]
                if min_price <= d.price <= max_price
            ]
            if matching:
                result[restaurant_name] = matching
        return result

    def get_dish_price(self, restaurant_name: str, dish_name: str) -> float:
        """
        Price of one dish.

        Raises:
            DeliveryError: If the restaurant or the dish is unknown
        """
        self._require_restaurant(restaurant_name)
        for dish in self._dishes[restaurant_name]:
            if dish.name == dish_name:
                return dish.price
        raise self._fail(
            f"Dish '{dish_name}' is not sold by '{restaurant_name}'",
            ErrorCode.UNKNOWN_DISH,
        )

    # =========================================================================
    # ORDERS
    # =========================================================================

    def add_order(
        self,
        dish_names: Sequence[str],
        quantities: Sequence[int],
        customer_name: str,
        restaurant_name: str,
        delivery_time: int,
        delivery_distance: int,
    ) -> int:
        """
        Place a delivery order and return its number.

        Dish names, quantities, hour and distance are stored as given.
        Hours outside the delivery window are accepted with a warning.

        Args:
            dish_names: Names of the ordered dishes
            quantities: Quantity for each dish, by position
            customer_name: Name of the customer
            restaurant_name: Registered restaurant the order goes to
            delivery_time: Delivery hour
            delivery_distance: Delivery distance in kilometers

        Returns:
            The order number (first order of a service gets 1)

        Raises:
            DeliveryError: If the restaurant is unknown. No number is
                consumed in that case.
        """
        self._require_restaurant(restaurant_name)

        number = self._next_order_number
        order = Order.from_sequences(
            number=number,
            dish_names=dish_names,
            quantities=quantities,
            customer_name=customer_name,
            restaurant_name=restaurant_name,
            delivery_time=delivery_time,
            delivery_distance=delivery_distance,
        )
        if not self.settings.in_delivery_window(delivery_time):
            logger.warning(
                f"Order #{number}: delivery hour {delivery_time} outside "
                f"{self.settings.earliest_delivery_hour}-{self.settings.latest_delivery_hour}"
            )

        self._orders[number] = order
        self._next_order_number += 1
        logger.info(
            f"Order #{number} placed: {customer_name} @ {restaurant_name} "
            f"(hour {delivery_time}, {delivery_distance} km)"
        )
        return number

    def get_pending_orders(self) -> int:
        """Number of orders not yet assigned to a delivery."""
        return sum(1 for o in self._orders.values() if not o.assigned)

    def get_order(self, number: int) -> OrderResponse:
        """
        Snapshot of one order.

        Raises:
            DeliveryError: If no order has this number
        """
        order = self._orders.get(number)
        if order is None:
            raise self._fail(f"Order #{number} does not exist", ErrorCode.UNKNOWN_ORDER)
        return OrderResponse.model_validate(order)

    def get_orders(self) -> list[OrderResponse]:
        """Snapshots of all orders in arrival order."""
        return [
            OrderResponse.model_validate(self._orders[n])
            for n in sorted(self._orders)
        ]

    # =========================================================================
    # SCHEDULING
    # =========================================================================

    def schedule_delivery(self, delivery_time: int, max_distance: int, max_orders: int) -> list[int]:
        """
        Assign the earliest pending orders matching a delivery slot.

        Picks orders booked for exactly ``delivery_time`` whose distance
        is at most ``max_distance``, first come first served, up to
        ``max_orders``. Picked orders are marked assigned and are never
        returned again.

        Returns:
            Order numbers in arrival order (empty if nothing matches)
        """
        selected = scheduling.select_orders(
            self._orders.values(), delivery_time, max_distance, max_orders
        )
        for order in selected:
            order.mark_assigned()

        numbers = [o.number for o in selected]
        logger.info(
            f"Delivery round hour={delivery_time} max_km={max_distance} "
            f"limit={max_orders}: {len(numbers)} assigned"
        )
        return numbers

    # =========================================================================
    # RATINGS
    # =========================================================================

    def set_rating_for_restaurant(self, restaurant_name: str, rating: int) -> None:
        """
        Record a customer rating.

        Ratings outside the accepted bounds are discarded without error,
        before the restaurant is looked up.

        Raises:
            DeliveryError: If the rating is accepted but the restaurant
                is unknown
        """
        if not ratings.accepts_rating(rating):
            logger.debug(f"Discarded out-of-range rating {rating} for '{restaurant_name}'")
            return
        self._require_restaurant(restaurant_name).add_rating(rating)

    def get_ratings(self, restaurant_name: str) -> list[int]:
        """Copy of a restaurant's ratings, in the order given."""
        return list(self._require_restaurant(restaurant_name).ratings)

    def get_average_rating(self, restaurant_name: str) -> float:
        """Mean rating of a restaurant, 0.0 when it has none."""
        return self._require_restaurant(restaurant_name).average

    def restaurants_average_rating(self) -> list[str]:
        """
        Restaurants with a positive average, best average first.

        Equal averages keep registration order.
        """
        return ratings.rank_by_average(self._restaurants.values())

    def best_restaurant(self) -> Optional[str]:
        """
        Restaurant with the highest average rating.

        Ties go to the name that sorts first.

        Returns:
            Restaurant name, or None if nobody averages above 0
        """
        by_name = (self._restaurants[n] for n in sorted(self._restaurants))
        return ratings.best_of(by_name)

    # =========================================================================
    # AGGREGATION
    # =========================================================================

    def orders_per_category(self) -> dict[str, int]:
        """
        Number of orders placed with restaurants of each category.

        Every registered category is present, with 0 when none of its
        restaurants received an order. Keys are sorted ascending.
        """
        counts = {category: 0 for category in sorted(self._categories)}
        for order in self._orders.values():
            category = self._restaurants[order.restaurant_name].category
            counts[category] += 1
        return counts

    def summary(self) -> ServiceSummary:
        """Counts of everything the service currently holds."""
        pending = self.get_pending_orders()
        return ServiceSummary(
            categories=len(self._categories),
            restaurants=len(self._restaurants),
            dishes=sum(len(menu) for menu in self._dishes.values()),
            orders=len(self._orders),
            pending_orders=pending,
            assigned_orders=len(self._orders) - pending,
        )
