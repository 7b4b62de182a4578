# tests/conftest.py
"""
Pytest configuration and fixtures.
Every test gets fresh settings and a fresh, empty service.
"""

import os

import pytest

from food_delivery import DeliveryService
from food_delivery.core.config import Settings, get_settings
from food_delivery.services import reset_delivery_service


@pytest.fixture(autouse=True)
def clean_caches(monkeypatch):
    """Isolate tests from DELIVERY_* variables and cached singletons."""
    for key in list(os.environ):
        if key.upper().startswith("DELIVERY_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    reset_delivery_service()
    yield
    get_settings.cache_clear()
    reset_delivery_service()


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def service(settings):
    return DeliveryService(settings)


@pytest.fixture
def catalog(service):
    """Three categories (Burger left empty), three restaurants with dishes."""
    service.add_category("Pizza")
    service.add_category("Sushi")
    service.add_category("Burger")
    service.add_restaurant("R1", "Pizza")
    service.add_restaurant("R2", "Sushi")
    service.add_restaurant("R0", "Pizza")
    service.add_dish("margherita", "R1", 5.0)
    service.add_dish("marinara", "R1", 4.0)
    service.add_dish("truffle", "R1", 20.0)
    service.add_dish("ramen", "R2", 12.0)
    service.add_dish("calzone", "R0", 7.5)
    return service
