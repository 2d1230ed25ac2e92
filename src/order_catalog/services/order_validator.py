"""Validation rules an order must pass before it is placed."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from order_catalog.models.order_models import Order

logger = logging.getLogger(__name__)


class ValidationReason(str, Enum):
    """Reasons an order can be rejected."""

    EMPTY_ORDER = "empty_order"
    INVALID_QUANTITY = "invalid_quantity"
    BELOW_MINIMUM = "below_minimum"
    MISSING_CONTACT = "missing_contact"


@dataclass
class ValidationResult:
    """Outcome of validating an order.

    Attributes:
        valid: Whether the order passed every rule
        reason: First failed rule, None when valid
        message: Human-readable explanation, None when valid
    """

    valid: bool
    reason: ValidationReason | None = None
    message: str | None = None


class OrderValidator:
    """Checks an order against the placement rules, first failure wins."""

    def __init__(self, minimum_amount: Decimal = Decimal("10.00")) -> None:
        """Initialize the validator.

        Args:
            minimum_amount: Smallest subtotal accepted for delivery
        """
        self.minimum_amount = minimum_amount

    def validate(self, order: Order) -> ValidationResult:
        """Run all rules against an order.

        Args:
            order: Order to validate

        Returns:
            ValidationResult describing the first failed rule, if any
        """
        items = order.get_items()

        if not items:
            return self._reject(order, ValidationReason.EMPTY_ORDER, "Order has no items")

        for item in items:
            if item.quantity < 1:
                return self._reject(
                    order,
                    ValidationReason.INVALID_QUANTITY,
                    f"Quantity for {item.food_item.id} must be at least 1, got {item.quantity}",
                )

        total = order.calculate_total()
        if total < self.minimum_amount:
            return self._reject(
                order,
                ValidationReason.BELOW_MINIMUM,
                f"Order total {total} is below minimum {self.minimum_amount}",
            )

        if not order.customer.email:
            return self._reject(
                order, ValidationReason.MISSING_CONTACT, "Customer has no email address"
            )

        return ValidationResult(valid=True)

    def _reject(self, order: Order, reason: ValidationReason, message: str) -> ValidationResult:
        logger.warning(f"Order {order.id} failed validation: {message}")
        return ValidationResult(valid=False, reason=reason, message=message)
