"""Custom metrics for order processing."""

from decimal import Decimal

from opentelemetry import metrics

meter = metrics.get_meter("order-catalog")

orders_placed_counter = meter.create_counter(
    name="orders_placed_total",
    description="Total number of orders placed by payment method",
    unit="1",
)

order_failure_counter = meter.create_counter(
    name="order_failures_total",
    description="Total number of orders rejected, by failure reason",
    unit="1",
)

order_total_histogram = meter.create_histogram(
    name="order_total_amount",
    description="Final charged amount of placed orders",
    unit="USD",
)


def record_order_placed(payment_method: str, total: Decimal) -> None:
    """Record a successfully placed order.

    Args:
        payment_method: Name of the payment method used
        total: Final amount charged
    """
    orders_placed_counter.add(1, {"payment_method": payment_method})
    order_total_histogram.record(float(total), {"payment_method": payment_method})


def record_order_failure(reason: str) -> None:
    """Record a rejected order.

    Args:
        reason: Failure reason code
    """
    order_failure_counter.add(1, {"reason": reason})
