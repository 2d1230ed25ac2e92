"""Order service for building and placing orders.

This is the boundary where caller input is checked: quantities below one and
unknown food items are reported here as result values, never raised, and the
order model itself stays free of validation.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from order_catalog.models.order_models import Order, OrderItem
from order_catalog.observability import metrics
from order_catalog.observability.decorators import traced
from order_catalog.payments.base_payment import PaymentMethod, PaymentResult
from order_catalog.repositories.catalog_repository import CatalogRepository
from order_catalog.repositories.order_repository import OrderRepository
from order_catalog.services.checkout_service import CheckoutService
from order_catalog.services.notification_service import (
    EmailService,
    NotificationManager,
    SMSService,
)
from order_catalog.services.order_validator import OrderValidator, ValidationResult
from order_catalog.services.pricing_service import OrderPriceCalculator, PriceBreakdown

logger = logging.getLogger(__name__)


class CartFailureReason(str, Enum):
    """Reasons a line cannot be added to an order."""

    INVALID_QUANTITY = "invalid_quantity"
    NOT_FOUND = "not_found"


class OrderFailureReason(str, Enum):
    """Step at which placing an order stopped."""

    VALIDATION_FAILED = "validation_failed"
    DUPLICATE_ORDER = "duplicate_order"
    PAYMENT_FAILED = "payment_failed"


@dataclass
class CartResult:
    """Result of adding a line to an order.

    Attributes:
        success: Whether the line was added
        item: The line that was appended, None on failure
        reason: Failure reason, None on success
        error_message: Error message if the add failed, None otherwise
    """

    success: bool
    item: OrderItem | None = None
    reason: CartFailureReason | None = None
    error_message: str | None = None


@dataclass
class OrderResult:
    """Result of placing an order.

    Attributes:
        success: Whether the order was paid for and saved
        order_id: The order that was placed
        reason: Step that failed, None on success
        validation: Validation outcome, if validation ran
        breakdown: Price breakdown, if pricing ran
        payment: Payment outcome, if payment was attempted
    """

    success: bool
    order_id: str
    reason: OrderFailureReason | None = None
    validation: ValidationResult | None = None
    breakdown: PriceBreakdown | None = None
    payment: PaymentResult | None = None


class OrderService:
    """Service for building orders from the catalog and placing them.

    Placement runs validate, price, pay, save and notify, each handled by an
    injected collaborator, and stops at the first step that fails.
    """

    def __init__(
        self,
        catalog_repository: CatalogRepository,
        order_repository: OrderRepository,
        validator: OrderValidator,
        calculator: OrderPriceCalculator,
        checkout_service: CheckoutService,
        notification_manager: NotificationManager,
        customer_notifier: EmailService,
        driver_notifier: SMSService,
    ) -> None:
        """Initialize the OrderService.

        Args:
            catalog_repository: Lookups for food items
            order_repository: Storage for placed orders
            validator: Placement rules
            calculator: Pricing for the amount to charge
            checkout_service: Payment finalization
            notification_manager: Message composition
            customer_notifier: Email channel for customers
            driver_notifier: SMS channel for drivers
        """
        self.catalog_repository = catalog_repository
        self.order_repository = order_repository
        self.validator = validator
        self.calculator = calculator
        self.checkout_service = checkout_service
        self.notification_manager = notification_manager
        self.customer_notifier = customer_notifier
        self.driver_notifier = driver_notifier

    def add_to_order(self, order: Order, food_item_id: str, quantity: int) -> CartResult:
        """Add a catalog item to an order as a new line.

        Args:
            order: Order to add to
            food_item_id: Catalog id of the food item
            quantity: Number of units, at least 1

        Returns:
            CartResult with the appended line, or the reason nothing was added
        """
        if quantity < 1:
            error_msg = f"Quantity must be at least 1, got {quantity}"
            logger.warning(f"Rejected line for order {order.id}: {error_msg}")
            return CartResult(
                success=False,
                reason=CartFailureReason.INVALID_QUANTITY,
                error_message=error_msg,
            )

        food_item = self.catalog_repository.find_food_item_by_id(food_item_id)
        if food_item is None:
            error_msg = f"Food item {food_item_id} not found"
            logger.warning(f"Rejected line for order {order.id}: {error_msg}")
            return CartResult(
                success=False,
                reason=CartFailureReason.NOT_FOUND,
                error_message=error_msg,
            )

        item = OrderItem(food_item=food_item, quantity=quantity)
        order.add_item(item)
        return CartResult(success=True, item=item)

    @traced("place_order")
    def place_order(self, order: Order, payment_method: PaymentMethod) -> OrderResult:
        """Validate, price, charge, save and announce an order.

        Args:
            order: Order to place
            payment_method: How the customer pays

        Returns:
            OrderResult describing how far placement got
        """
        logger.info(f"Processing order {order.id}")

        # Step 1: Validate
        validation = self.validator.validate(order)
        if not validation.valid:
            return self._failed(order, OrderFailureReason.VALIDATION_FAILED, validation=validation)

        # Step 2: Reject orders already on record before any money moves
        if self.order_repository.find_by_id(order.id) is not None:
            logger.warning(f"Order {order.id} has already been placed")
            return self._failed(order, OrderFailureReason.DUPLICATE_ORDER, validation=validation)

        # Step 3: Price and pay
        breakdown = self.calculator.calculate_breakdown(order)
        payment = self.checkout_service.finalize_payment(payment_method, breakdown.total)
        if not payment.success:
            return self._failed(
                order,
                OrderFailureReason.PAYMENT_FAILED,
                validation=validation,
                breakdown=breakdown,
                payment=payment,
            )

        # Step 4: Save and notify
        self.order_repository.save(order)

        self.notification_manager.notify_order_placed(
            self.customer_notifier, order, f"{breakdown.total:.2f}"
        )
        if order.driver is not None:
            self.notification_manager.notify_driver(self.driver_notifier, order.driver, order)

        metrics.record_order_placed(payment.method, breakdown.total)
        logger.info(f"Order {order.id} placed successfully, total {breakdown.total:.2f}")

        return OrderResult(
            success=True,
            order_id=order.id,
            validation=validation,
            breakdown=breakdown,
            payment=payment,
        )

    def _failed(
        self,
        order: Order,
        reason: OrderFailureReason,
        validation: ValidationResult | None = None,
        breakdown: PriceBreakdown | None = None,
        payment: PaymentResult | None = None,
    ) -> OrderResult:
        metrics.record_order_failure(reason.value)
        logger.error(f"Order {order.id} not placed: {reason.value}")
        return OrderResult(
            success=False,
            order_id=order.id,
            reason=reason,
            validation=validation,
            breakdown=breakdown,
            payment=payment,
        )
