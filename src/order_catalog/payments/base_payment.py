"""Base class for simulated payment methods.

No money moves: each method logs what it would do and reports the outcome as
a PaymentResult. Any PaymentMethod can be handed to checkout without the caller
knowing which one it is, so every implementation reports failures the same way
and none of them raise for an amount they cannot take.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

logger = logging.getLogger(__name__)


class PaymentFailureReason(str, Enum):
    """Reasons a simulated payment can fail."""

    INVALID_AMOUNT = "invalid_amount"
    INSUFFICIENT_FUNDS = "insufficient_funds"


@dataclass
class PaymentResult:
    """Outcome of a payment attempt.

    Attributes:
        success: Whether the payment was accepted
        method: Name of the payment method used
        amount: Amount requested
        reason: Failure reason, None on success
        pending_collection: True when the money is collected later (cash on delivery)
    """

    success: bool
    method: str
    amount: Decimal
    reason: PaymentFailureReason | None = None
    pending_collection: bool = False


class PaymentMethod(ABC):
    """Abstract base class for payment methods.

    Subclasses that draw on a limited balance pass it to __init__; None means
    unlimited.
    """

    def __init__(self, method_name: str, balance: Decimal | None = None) -> None:
        """Initialize the payment method.

        Args:
            method_name: Name of the method (e.g., 'credit_card', 'paypal')
            balance: Funds available, or None for no limit
        """
        self.method_name = method_name
        self.balance = balance

    @abstractmethod
    def pay(self, amount: Decimal) -> PaymentResult:
        """Charge an amount.

        Args:
            amount: Amount to charge

        Returns:
            PaymentResult: Success, or failure with a reason. Never raises for
            an amount the method cannot take.
        """
        pass

    def _check_amount(self, amount: Decimal) -> PaymentResult | None:
        """Shared pre-checks. Returns a failed result, or None if the charge may proceed."""
        if amount < 0:
            return self._fail(amount, PaymentFailureReason.INVALID_AMOUNT)

        if self.balance is not None and amount > self.balance:
            return self._fail(amount, PaymentFailureReason.INSUFFICIENT_FUNDS)

        return None

    def _debit(self, amount: Decimal) -> PaymentResult:
        if self.balance is not None:
            self.balance -= amount
        return PaymentResult(success=True, method=self.method_name, amount=amount)

    def _fail(self, amount: Decimal, reason: PaymentFailureReason) -> PaymentResult:
        logger.warning(f"{self.method_name} payment of {amount} failed: {reason.value}")
        return PaymentResult(success=False, method=self.method_name, amount=amount, reason=reason)
