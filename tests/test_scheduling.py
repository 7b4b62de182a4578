import pytest

from food_delivery import DeliveryError
from food_delivery.models import Order
from food_delivery.services.scheduling import select_orders


@pytest.fixture
def shop(service):
    service.add_category("Pizza")
    service.add_restaurant("R", "Pizza")
    for distance in (3, 10, 4, 2):
        service.add_order(["margherita"], [1], "Anna", "R", 20, distance)
    return service


def test_schedule_in_arrival_order_with_limit(shop):
    assert shop.schedule_delivery(20, 5, 2) == [1, 3]
    assert shop.get_pending_orders() == 2
    assert shop.schedule_delivery(20, 5, 2) == [4]
    assert shop.schedule_delivery(20, 5, 2) == []
    assert shop.get_pending_orders() == 1


def test_schedule_distance_inclusive(shop):
    assert shop.schedule_delivery(20, 10, 10) == [1, 2, 3, 4]


def test_schedule_requires_exact_hour(shop):
    assert shop.schedule_delivery(19, 100, 10) == []
    assert shop.schedule_delivery(21, 100, 10) == []
    assert shop.get_pending_orders() == 4


@pytest.mark.parametrize("max_orders", [0, -1])
def test_non_positive_limit_assigns_nothing(shop, max_orders):
    assert shop.schedule_delivery(20, 100, max_orders) == []
    assert shop.get_pending_orders() == 4


def test_orders_never_returned_twice(shop):
    shop.add_order(["x"], [1], "Bob", "R", 20, 1)
    seen = []
    for _ in range(4):
        seen.extend(shop.schedule_delivery(20, 100, 2))
    assert sorted(seen) == [1, 2, 3, 4, 5]
    assert len(seen) == len(set(seen))
    assert shop.get_pending_orders() == 0


def test_pending_count_matches_assignments(shop):
    returned = shop.schedule_delivery(20, 5, 1) + shop.schedule_delivery(20, 100, 1)
    assert shop.get_pending_orders() == 4 - len(returned)
    assert all(shop.get_order(n).assigned for n in returned)


def test_select_orders_does_not_assign():
    orders = [
        Order.from_sequences(2, ["a"], [1], "Anna", "R", 20, 1),
        Order.from_sequences(1, ["b"], [1], "Bob", "R", 20, 1),
    ]
    picked = select_orders(orders, 20, 5, 5)
    assert [o.number for o in picked] == [1, 2]
    assert not any(o.assigned for o in orders)


def test_mark_assigned_is_one_way():
    order = Order.from_sequences(1, ["a"], [1], "Anna", "R", 20, 1)
    order.mark_assigned()
    with pytest.raises(DeliveryError):
        order.mark_assigned()
    assert order.assigned
