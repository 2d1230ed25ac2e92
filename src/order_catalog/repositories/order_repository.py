"""Order storage abstraction and its in-memory implementation.

Services depend on OrderRepository and receive a concrete implementation
through their constructor. Following the catalog repository, expected failures
are reported as None/False rather than exceptions.
"""

import logging
from abc import ABC, abstractmethod

from order_catalog.models.order_models import Order

logger = logging.getLogger(__name__)


class OrderRepository(ABC):
    """Abstract base class for order storage.

    Implementations accept and return whole Order values and never reach into
    an order's lines.
    """

    @abstractmethod
    def save(self, order: Order) -> bool:
        """Store a new order.

        Args:
            order: Order to store

        Returns:
            bool: True if stored, False if an order with the same id already exists
        """
        pass

    @abstractmethod
    def find_by_id(self, order_id: str) -> Order | None:
        """Retrieve an order by id.

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self) -> list[Order]:
        """List all stored orders in the order they were saved."""
        pass

    @abstractmethod
    def update(self, order: Order) -> bool:
        """Replace a stored order.

        Returns:
            bool: True if replaced, False if no order with that id exists
        """
        pass

    @abstractmethod
    def delete(self, order_id: str) -> bool:
        """Remove an order.

        Returns:
            bool: True if removed, False if no order with that id exists
        """
        pass


class InMemoryOrderRepository(OrderRepository):
    """Dict-backed order repository.

    Contents last as long as the instance.
    """

    def __init__(self, orders: list[Order] | None = None) -> None:
        """Initialize repository.

        Args:
            orders: Optional orders to preload
        """
        self._orders: dict[str, Order] = {}
        for order in orders or []:
            self._orders[order.id] = order

    def save(self, order: Order) -> bool:
        if order.id in self._orders:
            logger.warning(f"Order {order.id} already exists, not saving")
            return False

        self._orders[order.id] = order
        logger.info(f"Saved order {order.id}")
        return True

    def find_by_id(self, order_id: str) -> Order | None:
        return self._orders.get(order_id)

    def find_all(self) -> list[Order]:
        return list(self._orders.values())

    def update(self, order: Order) -> bool:
        if order.id not in self._orders:
            logger.warning(f"Cannot update missing order {order.id}")
            return False

        self._orders[order.id] = order
        logger.info(f"Updated order {order.id}")
        return True

    def delete(self, order_id: str) -> bool:
        if self._orders.pop(order_id, None) is None:
            logger.warning(f"Cannot delete missing order {order_id}")
            return False

        logger.info(f"Deleted order {order_id}")
        return True
