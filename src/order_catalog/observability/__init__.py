"""OpenTelemetry instrumentation and logging utilities."""

from order_catalog.observability.config import configure_logging, setup_observability
from order_catalog.observability.decorators import traced

__all__ = ["setup_observability", "configure_logging", "traced"]
