"""Simulated payment method implementations."""

import logging
from decimal import Decimal

from order_catalog.payments.base_payment import PaymentMethod, PaymentResult

logger = logging.getLogger(__name__)


class CreditCardPayment(PaymentMethod):
    """Card payment against an optional credit limit."""

    def __init__(self, card_last_four: str = "0000", balance: Decimal | None = None) -> None:
        super().__init__("credit_card", balance)
        self.card_last_four = card_last_four

    def pay(self, amount: Decimal) -> PaymentResult:
        failure = self._check_amount(amount)
        if failure is not None:
            return failure

        logger.info(f"Paying {amount} using credit card ending {self.card_last_four}")
        return self._debit(amount)


class PayPalPayment(PaymentMethod):
    def __init__(self, account_email: str, balance: Decimal | None = None) -> None:
        super().__init__("paypal", balance)
        self.account_email = account_email

    def pay(self, amount: Decimal) -> PaymentResult:
        failure = self._check_amount(amount)
        if failure is not None:
            return failure

        logger.info(f"Paying {amount} using PayPal account {self.account_email}")
        return self._debit(amount)


class BankTransferPayment(PaymentMethod):
    def __init__(self, balance: Decimal | None = None) -> None:
        super().__init__("bank_transfer", balance)

    def pay(self, amount: Decimal) -> PaymentResult:
        failure = self._check_amount(amount)
        if failure is not None:
            return failure

        logger.info(f"Processing bank transfer of {amount}")
        return self._debit(amount)


class CryptoPayment(PaymentMethod):
    def __init__(self, balance: Decimal | None = None) -> None:
        super().__init__("crypto", balance)

    def pay(self, amount: Decimal) -> PaymentResult:
        failure = self._check_amount(amount)
        if failure is not None:
            return failure

        logger.info(f"Processing crypto payment of {amount}")
        return self._debit(amount)


class CashOnDeliveryPayment(PaymentMethod):
    """Cash collected by the driver; always accepted for a valid amount."""

    def __init__(self) -> None:
        super().__init__("cash_on_delivery")

    def pay(self, amount: Decimal) -> PaymentResult:
        failure = self._check_amount(amount)
        if failure is not None:
            return failure

        logger.info(f"Marked as cash on delivery for {amount}")
        return PaymentResult(
            success=True, method=self.method_name, amount=amount, pending_collection=True
        )
