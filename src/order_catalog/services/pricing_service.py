"""Order pricing: discounts, tax and delivery fee.

New discount types are added by subclassing DiscountProvider; the calculator
never branches on discount type.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from order_catalog.models.order_models import Order

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def to_cents(amount: Decimal) -> Decimal:
    """Round a currency amount to two decimal places."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


class DiscountProvider(ABC):
    """Abstract base class for discounts applied to an order subtotal."""

    @abstractmethod
    def apply_discount(self, amount: Decimal) -> Decimal:
        """Return the amount after the discount. Never negative."""
        pass


class NoDiscount(DiscountProvider):
    def apply_discount(self, amount: Decimal) -> Decimal:
        return amount


class PercentageDiscount(DiscountProvider):
    """Take a percentage off the amount."""

    def __init__(self, percentage: Decimal) -> None:
        if not Decimal("0") <= percentage <= Decimal("100"):
            raise ValueError("percentage must be between 0 and 100")
        self.percentage = percentage

    def apply_discount(self, amount: Decimal) -> Decimal:
        return amount * (1 - self.percentage / 100)


class FixedAmountDiscount(DiscountProvider):
    """Take a fixed amount off, floored at zero."""

    def __init__(self, discount_amount: Decimal) -> None:
        if discount_amount < 0:
            raise ValueError("discount_amount must be non-negative")
        self.discount_amount = discount_amount

    def apply_discount(self, amount: Decimal) -> Decimal:
        return max(amount - self.discount_amount, Decimal("0"))


@dataclass
class PriceBreakdown:
    """Itemised price of an order.

    Attributes:
        subtotal: Sum of line totals
        discount: Amount taken off the subtotal
        tax: Tax on the discounted subtotal
        delivery_fee: Flat delivery charge
        total: Amount to charge
    """

    subtotal: Decimal
    discount: Decimal
    tax: Decimal
    delivery_fee: Decimal
    total: Decimal


class OrderPriceCalculator:
    """Computes what a customer pays for an order."""

    def __init__(
        self,
        tax_rate: Decimal = Decimal("0.15"),
        delivery_fee: Decimal = Decimal("5.00"),
        discount: DiscountProvider | None = None,
    ) -> None:
        """Initialize the calculator.

        Args:
            tax_rate: Tax rate as a fraction (0.15 is 15%)
            delivery_fee: Flat delivery fee added to every order
            discount: Discount applied to the subtotal (none by default)
        """
        self.tax_rate = tax_rate
        self.delivery_fee = delivery_fee
        self.discount = discount or NoDiscount()

    def calculate(self, order: Order) -> Decimal:
        """Order subtotal before discount, tax and delivery."""
        return order.calculate_total()

    def calculate_with_tax(self, order: Order) -> Decimal:
        subtotal = self.calculate(order)
        return to_cents(subtotal + subtotal * self.tax_rate)

    def calculate_with_delivery(self, order: Order) -> Decimal:
        return to_cents(self.calculate(order) + self.delivery_fee)

    def calculate_breakdown(self, order: Order) -> PriceBreakdown:
        """Compute the full price breakdown.

        Args:
            order: Order to price

        Returns:
            PriceBreakdown with every component rounded to cents
        """
        subtotal = self.calculate(order)
        # subtotal - discount + tax + delivery_fee == total
        discounted = to_cents(self.discount.apply_discount(subtotal))
        tax = to_cents(discounted * self.tax_rate)
        delivery_fee = to_cents(self.delivery_fee)

        breakdown = PriceBreakdown(
            subtotal=to_cents(subtotal),
            discount=to_cents(subtotal) - discounted,
            tax=tax,
            delivery_fee=delivery_fee,
            total=discounted + tax + delivery_fee,
        )
        logger.debug(
            f"Order {order.id} priced: subtotal={breakdown.subtotal} "
            f"discount={breakdown.discount} tax={breakdown.tax} total={breakdown.total}"
        )
        return breakdown
