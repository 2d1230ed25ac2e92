"""Checkout: charge an amount with whichever payment method the customer picked."""

import logging
from decimal import Decimal

from order_catalog.payments.base_payment import PaymentMethod, PaymentResult

logger = logging.getLogger(__name__)


class CheckoutService:
    """Finalizes payments without knowing which method is in use."""

    def finalize_payment(self, method: PaymentMethod, amount: Decimal) -> PaymentResult:
        """Charge an amount.

        Args:
            method: Payment method chosen by the customer
            amount: Amount to charge

        Returns:
            PaymentResult from the method
        """
        logger.info(f"Finalizing payment of {amount} via {method.method_name}")
        result = method.pay(amount)

        if not result.success and result.reason is not None:
            logger.warning(f"Payment via {method.method_name} declined: {result.reason.value}")

        return result
