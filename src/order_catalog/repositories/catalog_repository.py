"""Read-only queries over a catalog.

Lookups by id return None when nothing matches rather than raising, so every
caller handles the not-found case explicitly.
"""

import logging

from order_catalog.data.seed_catalog import Catalog
from order_catalog.models.catalog_models import FoodItem, User
from order_catalog.models.order_models import Menu, Order, Restaurant

logger = logging.getLogger(__name__)


class CatalogRepository:
    """Repository for catalog lookups and order history queries."""

    def __init__(self, catalog: Catalog) -> None:
        """Initialize repository.

        Args:
            catalog: Catalog to query
        """
        self.catalog = catalog

    def find_restaurant_by_id(self, restaurant_id: str) -> Restaurant | None:
        """Retrieve a restaurant.

        Args:
            restaurant_id: Restaurant identifier

        Returns:
            Restaurant if found, None otherwise
        """
        restaurant = next((r for r in self.catalog.restaurants if r.id == restaurant_id), None)
        if restaurant is None:
            logger.debug(f"Restaurant not found: {restaurant_id}")
        return restaurant

    def list_restaurants(self) -> list[Restaurant]:
        """List all restaurants in catalog order."""
        return list(self.catalog.restaurants)

    def find_menu_by_id(self, menu_id: str) -> Menu | None:
        """Retrieve a menu by id, or None."""
        return next((m for m in self.catalog.menus if m.id == menu_id), None)

    def list_food_items(self) -> list[FoodItem]:
        """List the full food catalog in insertion order."""
        return list(self.catalog.food_items)

    def find_food_item_by_id(self, food_item_id: str) -> FoodItem | None:
        """Retrieve a food item.

        Args:
            food_item_id: Food item identifier

        Returns:
            FoodItem if found, None otherwise
        """
        food_item = next((f for f in self.catalog.food_items if f.id == food_item_id), None)
        if food_item is None:
            logger.debug(f"Food item not found: {food_item_id}")
        return food_item

    def find_customer_by_id(self, customer_id: str) -> User | None:
        """Retrieve a customer by id, or None."""
        return next((c for c in self.catalog.customers if c.id == customer_id), None)

    def find_driver_by_id(self, driver_id: str) -> User | None:
        """Retrieve a driver by id, or None."""
        return next((d for d in self.catalog.drivers if d.id == driver_id), None)

    def find_order_by_id(self, order_id: str) -> Order | None:
        """Retrieve a seed order.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        order = next((o for o in self.catalog.orders if o.id == order_id), None)
        if order is None:
            logger.debug(f"Order not found: {order_id}")
        return order

    def list_orders_by_customer(self, customer_id: str) -> list[Order]:
        """List orders placed by a customer.

        Args:
            customer_id: Customer identifier

        Returns:
            list: Orders in seed order (empty list if none found)
        """
        return [order for order in self.catalog.orders if order.customer.id == customer_id]

    def list_all_orders(self) -> list[Order]:
        """List every seed order in insertion order."""
        return list(self.catalog.orders)
