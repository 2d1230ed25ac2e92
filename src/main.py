"""Main entry point for the order catalog demo.

This module wires the seed catalog, repositories and services together from
environment configuration, and places a demo order when run directly.
"""

import logging
import os
from dataclasses import dataclass
from decimal import Decimal

from order_catalog.data.seed_catalog import build_seed_catalog
from order_catalog.models.order_models import Order
from order_catalog.observability import configure_logging, setup_observability
from order_catalog.payments.payment_methods import CreditCardPayment
from order_catalog.repositories.catalog_repository import CatalogRepository
from order_catalog.repositories.order_repository import InMemoryOrderRepository
from order_catalog.services.checkout_service import CheckoutService
from order_catalog.services.notification_service import (
    CustomerNotifier,
    DriverNotifier,
    NotificationManager,
)
from order_catalog.services.order_service import OrderService
from order_catalog.services.order_validator import OrderValidator
from order_catalog.services.pricing_service import OrderPriceCalculator

logger = logging.getLogger(__name__)


@dataclass
class Application:
    """Wired application components.

    Attributes:
        catalog_repository: Queries over the seed catalog
        order_repository: Storage for placed orders
        order_service: Order building and placement
    """

    catalog_repository: CatalogRepository
    order_repository: InMemoryOrderRepository
    order_service: OrderService


def create_application() -> Application:
    """Create and configure the application with all dependencies.

    This factory function:
    1. Configures logging
    2. Builds the seed catalog
    3. Initializes repositories
    4. Creates services from environment configuration

    Returns:
        Configured Application instance
    """
    log_level = os.getenv("LOG_LEVEL", "INFO")
    configure_logging(log_level)

    logger.info("Initializing order catalog...")

    catalog_repository = CatalogRepository(build_seed_catalog())
    order_repository = InMemoryOrderRepository()

    tax_rate = Decimal(os.getenv("TAX_RATE", "0.15"))
    delivery_fee = Decimal(os.getenv("DELIVERY_FEE", "5.00"))
    minimum_amount = Decimal(os.getenv("MIN_ORDER_AMOUNT", "10.00"))

    logger.info(
        f"Pricing configured - tax rate: {tax_rate}, delivery fee: {delivery_fee}, "
        f"minimum order: {minimum_amount}"
    )

    order_service = OrderService(
        catalog_repository=catalog_repository,
        order_repository=order_repository,
        validator=OrderValidator(minimum_amount=minimum_amount),
        calculator=OrderPriceCalculator(tax_rate=tax_rate, delivery_fee=delivery_fee),
        checkout_service=CheckoutService(),
        notification_manager=NotificationManager(),
        customer_notifier=CustomerNotifier(),
        driver_notifier=DriverNotifier(),
    )

    logger.info("Order catalog initialized successfully")

    return Application(
        catalog_repository=catalog_repository,
        order_repository=order_repository,
        order_service=order_service,
    )


def run_demo(app: Application) -> bool:
    """Build and place an order for the first seed customer.

    Returns:
        bool: True if the order was placed
    """
    customer = app.catalog_repository.find_customer_by_id("c1")
    driver = app.catalog_repository.find_driver_by_id("d1")
    if customer is None or driver is None:
        logger.error("Seed customer or driver missing")
        return False

    order = Order.create("demo1", customer)
    app.order_service.add_to_order(order, "f1", 2)
    app.order_service.add_to_order(order, "f5", 1)
    order.assign_driver(driver)

    result = app.order_service.place_order(order, CreditCardPayment(card_last_four="4242"))
    return result.success


if __name__ == "__main__":
    setup_observability(enable_exporters=os.getenv("ENABLE_OTLP_EXPORT", "false") == "true")
    application = create_application()
    raise SystemExit(0 if run_demo(application) else 1)
