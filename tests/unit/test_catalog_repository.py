"""Unit tests for CatalogRepository."""

from decimal import Decimal

import pytest

from order_catalog.data.seed_catalog import Catalog
from order_catalog.models.catalog_models import FoodItem, User
from order_catalog.models.order_models import Order, OrderItem
from order_catalog.repositories.catalog_repository import CatalogRepository


@pytest.mark.unit
class TestCatalogRepository:
    """Test suite for CatalogRepository against the seed catalog."""

    def test_repository_initialization(self, seed_catalog: Catalog) -> None:
        """Test that repository keeps the catalog it was given."""
        repo = CatalogRepository(seed_catalog)
        assert repo.catalog is seed_catalog

    def test_find_restaurant_by_id(self, catalog_repository: CatalogRepository) -> None:
        """Test finding a seeded restaurant."""
        restaurant = catalog_repository.find_restaurant_by_id("r2")

        assert restaurant is not None
        assert restaurant.name == "Amazing Pizza Palace"
        assert restaurant.menu is not None
        assert restaurant.menu.id == "m2"

    def test_find_restaurant_not_found(self, catalog_repository: CatalogRepository) -> None:
        """Test that an unknown restaurant id returns None."""
        assert catalog_repository.find_restaurant_by_id("r99") is None

    def test_list_restaurants(self, catalog_repository: CatalogRepository) -> None:
        """Test listing restaurants in seed order."""
        assert [r.id for r in catalog_repository.list_restaurants()] == ["r1", "r2", "r3", "r4"]

    def test_find_menu_by_id(self, catalog_repository: CatalogRepository) -> None:
        """Test finding menus and missing menus."""
        menu = catalog_repository.find_menu_by_id("m3")

        assert menu is not None
        assert menu.name == "Healthy Hub Menu"
        assert catalog_repository.find_menu_by_id("m99") is None

    def test_list_food_items(self, catalog_repository: CatalogRepository) -> None:
        """Test that the full catalog is returned in insertion order."""
        items = catalog_repository.list_food_items()

        assert len(items) == 20
        assert items[0].name == "Classic Burger"
        assert items[-1].name == "Apple Pie"

    def test_list_food_items_returns_copy(self, catalog_repository: CatalogRepository) -> None:
        """Test that callers cannot change the catalog through the returned list."""
        catalog_repository.list_food_items().clear()
        assert len(catalog_repository.list_food_items()) == 20

    def test_find_food_item_by_id(self, catalog_repository: CatalogRepository) -> None:
        """Test finding food items and missing food items."""
        item = catalog_repository.find_food_item_by_id("f9")

        assert item is not None
        assert item.name == "Pepperoni Pizza"
        assert item.price == Decimal("14.99")
        assert catalog_repository.find_food_item_by_id("f999") is None

    def test_find_customer_by_id(self, catalog_repository: CatalogRepository) -> None:
        """Test finding a customer."""
        customer = catalog_repository.find_customer_by_id("c1")

        assert customer is not None
        assert customer.name == "John Doe"

    def test_find_customer_not_found(self, catalog_repository: CatalogRepository) -> None:
        """Test that driver ids are not found among customers."""
        assert catalog_repository.find_customer_by_id("d1") is None

    def test_find_driver_by_id(self, catalog_repository: CatalogRepository) -> None:
        """Test finding a driver."""
        driver = catalog_repository.find_driver_by_id("d2")

        assert driver is not None
        assert driver.name == "Maria Rodriguez"

    def test_find_driver_not_found(self, catalog_repository: CatalogRepository) -> None:
        """Test that customer ids are not found among drivers."""
        assert catalog_repository.find_driver_by_id("c1") is None

    def test_find_order_by_id(self, catalog_repository: CatalogRepository) -> None:
        """Test finding a seed order."""
        order = catalog_repository.find_order_by_id("ord3")

        assert order is not None
        assert order.customer.id == "c3"
        assert len(order.get_items()) == 3

    def test_find_order_not_found(self, catalog_repository: CatalogRepository) -> None:
        """Test that an unknown order id returns None."""
        assert catalog_repository.find_order_by_id("ord99") is None

    def test_list_orders_by_customer(self, catalog_repository: CatalogRepository) -> None:
        """Test that c1's two orders come back in seed order."""
        orders = catalog_repository.list_orders_by_customer("c1")
        assert [o.id for o in orders] == ["ord1", "ord6"]

    def test_list_orders_by_customer_is_subset_of_all(
        self, catalog_repository: CatalogRepository
    ) -> None:
        """Test the filter against the full order list for every customer."""
        all_orders = catalog_repository.list_all_orders()

        for customer_id in ["c1", "c2", "c3", "c4", "c5"]:
            expected = [o for o in all_orders if o.customer.id == customer_id]
            assert catalog_repository.list_orders_by_customer(customer_id) == expected

    def test_list_orders_by_unknown_customer(self, catalog_repository: CatalogRepository) -> None:
        """Test that an unknown customer yields an empty list."""
        assert catalog_repository.list_orders_by_customer("c99") == []

    def test_list_all_orders(self, catalog_repository: CatalogRepository) -> None:
        """Test listing every seed order."""
        orders = catalog_repository.list_all_orders()
        assert [o.id for o in orders] == [f"ord{n}" for n in range(1, 9)]

    def test_custom_catalog(
        self, customer: User, burger: FoodItem
    ) -> None:
        """Test that a substitute catalog can be queried the same way."""

        def seeder(catalog: Catalog) -> list[Order]:
            order = Order.create("only", catalog.customers[0])
            order.add_item(OrderItem(food_item=catalog.food_items[0], quantity=1))
            return [order]

        repo = CatalogRepository(
            Catalog(food_items=(burger,), customers=(customer,), order_seeder=seeder)
        )

        assert repo.list_food_items() == [burger]
        assert repo.find_restaurant_by_id("r1") is None
        assert [o.id for o in repo.list_orders_by_customer(customer.id)] == ["only"]
