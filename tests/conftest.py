"""Shared pytest fixtures and configuration for all tests."""

from decimal import Decimal

import pytest

from order_catalog.data.seed_catalog import Catalog, build_seed_catalog
from order_catalog.models.catalog_models import FoodItem, User
from order_catalog.models.order_models import Order, OrderItem
from order_catalog.repositories.catalog_repository import CatalogRepository


@pytest.fixture
def seed_catalog() -> Catalog:
    """Fixture providing a freshly built demo catalog."""
    return build_seed_catalog()


@pytest.fixture
def catalog_repository(seed_catalog: Catalog) -> CatalogRepository:
    """Fixture providing a repository over the demo catalog."""
    return CatalogRepository(seed_catalog)


@pytest.fixture
def burger() -> FoodItem:
    """Fixture providing a sample burger."""
    return FoodItem(
        id="item_1",
        name="Classic Burger",
        description="Juicy beef patty",
        price=Decimal("10.99"),
    )


@pytest.fixture
def fries() -> FoodItem:
    """Fixture providing a sample side."""
    return FoodItem(
        id="item_2",
        name="French Fries",
        description="Crispy salted fries",
        price=Decimal("3.99"),
    )


@pytest.fixture
def customer() -> User:
    """Fixture providing a sample customer."""
    return User(id="cust_1", name="John Doe", email="john.doe@email.com", phone="+1234567890")


@pytest.fixture
def driver() -> User:
    """Fixture providing a sample driver."""
    return User(
        id="drv_1", name="Alex Driver", email="alex.driver@delivery.com", phone="+1987654321"
    )


@pytest.fixture
def sample_order(customer: User, burger: FoodItem, fries: FoodItem) -> Order:
    """Fixture providing an order of two burgers and one fries (25.97)."""
    order = Order.create("ord_123", customer)
    order.add_item(OrderItem(food_item=burger, quantity=2))
    order.add_item(OrderItem(food_item=fries, quantity=1))
    return order
