"""Unit tests for CheckoutService."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from order_catalog.payments.base_payment import (
    PaymentFailureReason,
    PaymentMethod,
    PaymentResult,
)
from order_catalog.payments.payment_methods import CreditCardPayment
from order_catalog.services.checkout_service import CheckoutService


@pytest.mark.unit
class TestCheckoutService:
    """Test suite for CheckoutService."""

    def test_finalize_payment_delegates_to_method(self) -> None:
        """Test that checkout charges through the given method."""
        method = MagicMock(spec=PaymentMethod)
        method.method_name = "mock"
        method.pay.return_value = PaymentResult(
            success=True, method="mock", amount=Decimal("12.00")
        )

        result = CheckoutService().finalize_payment(method, Decimal("12.00"))

        method.pay.assert_called_once_with(Decimal("12.00"))
        assert result.success is True

    def test_finalize_payment_returns_failure(self) -> None:
        """Test that declined payments are returned, not raised."""
        card = CreditCardPayment(balance=Decimal("5.00"))

        result = CheckoutService().finalize_payment(card, Decimal("12.00"))

        assert result.success is False
        assert result.reason == PaymentFailureReason.INSUFFICIENT_FUNDS
