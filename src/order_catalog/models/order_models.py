"""Relationship models built on top of the catalog entities.

- Menu and Restaurant aggregate parts that live independently of them.
- Order composes its OrderItem lines and is associated with customer and
  driver users that exist on their own.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from order_catalog.models.catalog_models import FoodItem, User


class Menu(BaseModel):
    """Named collection of food items.

    Holds references to existing FoodItem instances; the same item may appear
    on several menus.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique identifier for the menu")
    name: str = Field(..., description="Menu name")
    items: list[FoodItem] = Field(default_factory=list, description="Items on this menu")


class Restaurant(BaseModel):
    """Restaurant with an optional, replaceable menu."""

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(..., description="Unique identifier for the restaurant")
    name: str = Field(..., description="Restaurant name")
    menu: Menu | None = Field(None, description="Menu currently in use, if assigned")

    def update_menu(self, new_menu: Menu) -> None:
        """Point the restaurant at a different menu.

        Args:
            new_menu: Menu to use from now on
        """
        self.menu = new_menu


class OrderItem(BaseModel):
    """A single line of an order."""

    model_config = ConfigDict(frozen=True)

    food_item: FoodItem = Field(..., description="Food item ordered")
    quantity: int = Field(..., description="Number of units ordered")

    @property
    def total_price(self) -> Decimal:
        """Line total, computed from the current item price."""
        return self.food_item.price * self.quantity


class Order(BaseModel):
    """A customer order and the aggregate root for its lines.

    Lines are only reachable through add_item/get_items.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(..., description="Unique identifier for the order")
    customer: User = Field(..., description="Customer who placed the order")
    driver: User | None = Field(None, description="Assigned delivery driver")

    _items: list[OrderItem] = PrivateAttr(default_factory=list)

    @classmethod
    def create(cls, order_id: str, customer: User) -> "Order":
        """Create a new order with no lines and no driver.

        Args:
            order_id: Order identifier
            customer: Customer placing the order

        Returns:
            Order: Empty order
        """
        return cls(id=order_id, customer=customer)

    def add_item(self, item: OrderItem) -> None:
        """Append a line. Repeated food items become separate lines."""
        self._items.append(item)

    def get_items(self) -> list[OrderItem]:
        """Return a copy of the order lines in the order they were added."""
        return list(self._items)

    def calculate_total(self) -> Decimal:
        """Sum of all line totals (zero for an empty order)."""
        return sum((item.total_price for item in self._items), Decimal("0"))

    def assign_driver(self, driver: User) -> None:
        """Attach a driver, replacing any previously assigned one."""
        self.driver = driver
