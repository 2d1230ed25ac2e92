"""Demo catalog data.

The catalog is built by an explicit function rather than living in a module
global, so tests and callers can construct their own catalogs.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from decimal import Decimal
from functools import cached_property

from order_catalog.models.catalog_models import FoodItem, User
from order_catalog.models.order_models import Menu, Order, OrderItem, Restaurant


@dataclass(frozen=True)
class Catalog:
    """Static reference data plus seed orders.

    Attributes:
        food_items: All food items, in catalog order
        menus: Menus referencing the food items
        restaurants: Restaurants referencing the menus
        customers: Customer users
        drivers: Driver users
        order_seeder: Builds the seed orders from the other collections
    """

    food_items: tuple[FoodItem, ...] = ()
    menus: tuple[Menu, ...] = ()
    restaurants: tuple[Restaurant, ...] = ()
    customers: tuple[User, ...] = ()
    drivers: tuple[User, ...] = ()
    order_seeder: Callable[["Catalog"], list[Order]] | None = field(
        default=None, repr=False, compare=False
    )

    @cached_property
    def orders(self) -> tuple[Order, ...]:
        """Seed orders, built on first access."""
        if self.order_seeder is None:
            return ()
        return tuple(self.order_seeder(self))


def _item(item_id: str, name: str, description: str, price: str) -> FoodItem:
    return FoodItem(id=item_id, name=name, description=description, price=Decimal(price))


def _user(user_id: str, name: str, email: str, phone: str) -> User:
    return User(id=user_id, name=name, email=email, phone=phone)


def _order(
    order_id: str,
    customer: User,
    lines: list[tuple[FoodItem, int]],
    driver: User | None = None,
) -> Order:
    order = Order.create(order_id, customer)
    for food_item, quantity in lines:
        order.add_item(OrderItem(food_item=food_item, quantity=quantity))
    if driver is not None:
        order.assign_driver(driver)
    return order


def _seed_orders(catalog: Catalog) -> list[Order]:
    f = catalog.food_items
    c = catalog.customers
    d = catalog.drivers

    return [
        _order("ord1", c[0], [(f[0], 2), (f[4], 1), (f[14], 2)], d[0]),
        _order("ord2", c[1], [(f[8], 1), (f[15], 2), (f[17], 1)], d[1]),
        _order("ord3", c[2], [(f[11], 1), (f[13], 1), (f[15], 1)], d[2]),
        _order("ord4", c[3], [(f[1], 3), (f[4], 3), (f[5], 2), (f[14], 3), (f[17], 2)], d[0]),
        _order("ord5", c[4], [(f[8], 2), (f[9], 1), (f[10], 1), (f[14], 4)], d[1]),
        # Awaiting a driver
        _order("ord6", c[0], [(f[3], 1), (f[11], 1), (f[16], 1)]),
        _order("ord7", c[1], [(f[16], 2), (f[19], 1)]),
        _order("ord8", c[2], [(f[6], 1), (f[14], 1)], d[2]),
    ]


def build_seed_catalog() -> Catalog:
    """Build the demo catalog used by the application.

    Returns:
        Catalog: Food items f1-f20, menus m1-m4, restaurants r1-r4,
        customers c1-c5, drivers d1-d3 and lazily built orders ord1-ord8
    """
    food_items = (
        # Burgers
        _item("f1", "Classic Burger", "Juicy beef patty with lettuce and tomato", "10.99"),
        _item("f2", "Double Cheeseburger", "Two beef patties with double cheese", "13.99"),
        _item("f3", "Bacon Burger", "Beef patty with crispy bacon and BBQ sauce", "12.49"),
        _item("f4", "Veggie Burger", "Plant-based patty with avocado", "11.99"),
        # Sides
        _item("f5", "French Fries", "Crispy salted fries", "3.99"),
        _item("f6", "Onion Rings", "Golden fried onion rings", "4.49"),
        _item("f7", "Mozzarella Sticks", "Breaded mozzarella with marinara", "5.99"),
        # Pizza
        _item("f8", "Margherita Pizza", "Fresh mozzarella and basil", "12.99"),
        _item("f9", "Pepperoni Pizza", "Classic pepperoni and cheese", "14.99"),
        _item("f10", "BBQ Chicken Pizza", "Grilled chicken with BBQ sauce", "15.99"),
        _item("f11", "Veggie Supreme Pizza", "Loaded with fresh vegetables", "13.99"),
        # Salads
        _item("f12", "Caesar Salad", "Fresh romaine with caesar dressing", "8.99"),
        _item("f13", "Greek Salad", "Feta, olives, and fresh vegetables", "9.49"),
        _item("f14", "Cobb Salad", "Chicken, bacon, egg, and avocado", "11.99"),
        # Drinks
        _item("f15", "Coca Cola", "Classic soft drink", "2.49"),
        _item("f16", "Fresh Orange Juice", "Freshly squeezed orange juice", "3.99"),
        _item("f17", "Iced Coffee", "Cold brew coffee with ice", "4.49"),
        # Desserts
        _item("f18", "Chocolate Cake", "Rich chocolate layer cake", "6.99"),
        _item("f19", "Ice Cream Sundae", "Vanilla ice cream with toppings", "5.49"),
        _item("f20", "Apple Pie", "Classic apple pie with cinnamon", "5.99"),
    )

    menus = (
        Menu(id="m1", name="Burger Joint Menu", items=list(food_items[0:7])),
        Menu(id="m2", name="Pizza Palace Menu", items=list(food_items[7:11])),
        Menu(id="m3", name="Healthy Hub Menu", items=list(food_items[11:14])),
        Menu(id="m4", name="Full Menu", items=list(food_items)),
    )

    restaurants = (
        Restaurant(id="r1", name="Big Burger Joint", menu=menus[0]),
        Restaurant(id="r2", name="Amazing Pizza Palace", menu=menus[1]),
        Restaurant(id="r3", name="The Healthy Hub", menu=menus[2]),
        Restaurant(id="r4", name="Food Paradise", menu=menus[3]),
    )

    customers = (
        _user("c1", "John Doe", "john.doe@email.com", "+1234567890"),
        _user("c2", "Jane Smith", "jane.smith@email.com", "+1234567891"),
        _user("c3", "Mike Johnson", "mike.j@email.com", "+1234567892"),
        _user("c4", "Sarah Williams", "sarah.w@email.com", "+1234567893"),
        _user("c5", "David Brown", "david.b@email.com", "+1234567894"),
    )

    drivers = (
        _user("d1", "Alex Driver", "alex.driver@delivery.com", "+1987654321"),
        _user("d2", "Maria Rodriguez", "maria.r@delivery.com", "+1987654322"),
        _user("d3", "Tom Wilson", "tom.w@delivery.com", "+1987654323"),
    )

    return Catalog(
        food_items=food_items,
        menus=menus,
        restaurants=restaurants,
        customers=customers,
        drivers=drivers,
        order_seeder=_seed_orders,
    )
