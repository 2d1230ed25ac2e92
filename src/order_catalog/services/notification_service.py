"""Order notifications split by channel.

Each notifier implements only the channels its audience uses: customers get
email and push, drivers get SMS. Messages are logged and kept in memory.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from order_catalog.models.catalog_models import User
from order_catalog.models.order_models import Order

logger = logging.getLogger(__name__)


@dataclass
class Notification:
    """A message handed to a channel.

    Attributes:
        channel: 'email', 'sms' or 'push'
        recipient: Address, phone number or user id
        message: Message body
        subject: Subject or title, if the channel has one
    """

    channel: str
    recipient: str
    message: str
    subject: str | None = None


class EmailService(ABC):
    @abstractmethod
    def send_email(self, address: str, subject: str, message: str) -> None:
        pass

    @abstractmethod
    def send_bulk_email(self, addresses: list[str], subject: str, message: str) -> None:
        pass


class SMSService(ABC):
    @abstractmethod
    def send_sms(self, phone_number: str, message: str) -> None:
        pass

    @abstractmethod
    def send_bulk_sms(self, phone_numbers: list[str], message: str) -> None:
        pass


class PushService(ABC):
    @abstractmethod
    def send_push(self, user_id: str, title: str, message: str) -> None:
        pass

    @abstractmethod
    def send_push_to_all(self, title: str, message: str) -> None:
        pass


class _RecordingNotifier:
    """Keeps every notification sent, newest last."""

    def __init__(self) -> None:
        self.sent: list[Notification] = []

    def _record(self, notification: Notification) -> None:
        logger.info(
            f"{notification.channel} to {notification.recipient}: {notification.message}"
        )
        self.sent.append(notification)


class CustomerNotifier(_RecordingNotifier, EmailService, PushService):
    """Email and push notifications for customers."""

    def send_email(self, address: str, subject: str, message: str) -> None:
        self._record(Notification("email", address, message, subject))

    def send_bulk_email(self, addresses: list[str], subject: str, message: str) -> None:
        for address in addresses:
            self.send_email(address, subject, message)

    def send_push(self, user_id: str, title: str, message: str) -> None:
        self._record(Notification("push", user_id, message, title))

    def send_push_to_all(self, title: str, message: str) -> None:
        self._record(Notification("push", "*", message, title))


class DriverNotifier(_RecordingNotifier, SMSService):
    """SMS notifications for drivers."""

    def send_sms(self, phone_number: str, message: str) -> None:
        self._record(Notification("sms", phone_number, message))

    def send_bulk_sms(self, phone_numbers: list[str], message: str) -> None:
        for phone_number in phone_numbers:
            self.send_sms(phone_number, message)


class NotificationManager:
    """Composes order messages and sends them through the channel it is given."""

    def notify_order_placed(self, email_service: EmailService, order: Order, total: str) -> None:
        """Send the order confirmation email to the customer.

        Args:
            email_service: Channel to send through
            order: Order that was placed
            total: Formatted amount charged
        """
        email_service.send_email(
            order.customer.email,
            f"Order {order.id} Confirmed!",
            f"Thank you for your order of ${total}",
        )

    def notify_driver(self, sms_service: SMSService, driver: User, order: Order) -> None:
        """Tell a driver an order is ready for pickup."""
        sms_service.send_sms(
            driver.phone, f"New delivery: Order {order.id} is ready for pickup!"
        )

    def send_promotion(
        self, email_service: EmailService, push_service: PushService, addresses: list[str]
    ) -> None:
        email_service.send_bulk_email(addresses, "Special Offer!", "Get 20% off your next order!")
        push_service.send_push_to_all("Limited Time Offer", "20% off - Order now!")

    def notify_order_shipped(
        self, email_service: EmailService, order: Order, tracking_number: str
    ) -> None:
        """Tell the customer the order is on its way.

        Args:
            email_service: Channel to send through
            order: Order that left the restaurant
            tracking_number: Tracking reference for the delivery
        """
        email_service.send_email(
            order.customer.email,
            "Your order is on the way!",
            f"Order {order.id} has shipped. Tracking: {tracking_number}",
        )

    def notify_order_delivered(self, email_service: EmailService, order: Order) -> None:
        email_service.send_email(
            order.customer.email,
            f"Order {order.id} Delivered!",
            f"Your order {order.id} has been delivered. Enjoy your meal!",
        )

    def notify_order_cancelled(
        self, email_service: EmailService, order: Order, reason: str
    ) -> None:
        """Tell the customer the order was cancelled and why."""
        email_service.send_email(
            order.customer.email,
            f"Order {order.id} Cancelled",
            f"Your order {order.id} was cancelled. Reason: {reason}",
        )
