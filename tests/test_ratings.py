import pytest

from food_delivery import DeliveryError, DeliveryService
from food_delivery.core.exceptions import ErrorCode


@pytest.fixture
def rated(service):
    service.add_category("Pizza")
    for name in ("R1", "R2", "R3"):
        service.add_restaurant(name, "Pizza")
    for rating in (5, 2):
        service.set_rating_for_restaurant("R1", rating)
    for rating in (4, 4, 4):
        service.set_rating_for_restaurant("R2", rating)
    return service


def test_ranking_and_best(rated):
    assert rated.restaurants_average_rating() == ["R2", "R1"]
    assert rated.best_restaurant() == "R2"


def test_equal_averages_resolve_to_registration_and_name_order(service):
    service.add_category("Pizza")
    service.add_restaurant("R1", "Pizza")
    service.add_restaurant("R2", "Pizza")
    for rating in (5, 3):
        service.set_rating_for_restaurant("R1", rating)
    for rating in (4, 4, 4):
        service.set_rating_for_restaurant("R2", rating)
    assert service.restaurants_average_rating() == ["R1", "R2"]
    assert service.best_restaurant() == "R1"


def test_rating_bounds_are_fixed(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("DELIVERY_MAX_RATING=9\nDELIVERY_MIN_RATING=-3\n")
    monkeypatch.setenv("DELIVERY_MAX_RATING", "9")
    fresh = DeliveryService()
    fresh.add_category("Pizza")
    fresh.add_restaurant("R1", "Pizza")
    for rating in (7, 9, -1, 0, 5):
        fresh.set_rating_for_restaurant("R1", rating)
    assert fresh.get_ratings("R1") == [0, 5]


def test_out_of_range_rating_ignored(rated):
    rated.set_rating_for_restaurant("R1", 7)
    rated.set_rating_for_restaurant("R1", -1)
    assert rated.get_ratings("R1") == [5, 2]
    assert rated.get_average_rating("R1") == pytest.approx(3.5)


def test_bounds_are_accepted(rated):
    rated.set_rating_for_restaurant("R3", 0)
    rated.set_rating_for_restaurant("R3", 5)
    assert rated.get_ratings("R3") == [0, 5]
    assert rated.get_average_rating("R3") == pytest.approx(2.5)


def test_zero_average_excluded(rated):
    rated.set_rating_for_restaurant("R3", 0)
    assert "R3" not in rated.restaurants_average_rating()
    assert rated.get_average_rating("R3") == 0.0


def test_no_ratings(service):
    service.add_category("Pizza")
    service.add_restaurant("R1", "Pizza")
    assert service.restaurants_average_rating() == []
    assert service.best_restaurant() is None
    assert service.get_average_rating("R1") == 0.0


def test_rating_unknown_restaurant(service):
    with pytest.raises(DeliveryError) as exc:
        service.set_rating_for_restaurant("Nope", 3)
    assert exc.value.error_code == ErrorCode.UNKNOWN_RESTAURANT
    # range check happens first
    service.set_rating_for_restaurant("Nope", 9)


def test_ties_keep_registration_order(service):
    service.add_category("Pizza")
    for name in ("Zeta", "Alpha", "Mid"):
        service.add_restaurant(name, "Pizza")
        service.set_rating_for_restaurant(name, 4)
    service.set_rating_for_restaurant("Mid", 5)
    assert service.restaurants_average_rating() == ["Mid", "Zeta", "Alpha"]


def test_best_tie_goes_to_first_name(service):
    service.add_category("Pizza")
    for name in ("Zeta", "Alpha"):
        service.add_restaurant(name, "Pizza")
        service.set_rating_for_restaurant(name, 3)
    assert service.best_restaurant() == "Alpha"


def test_ratings_copy_is_detached(rated):
    rated.get_ratings("R1").append(1)
    assert rated.get_ratings("R1") == [5, 2]

