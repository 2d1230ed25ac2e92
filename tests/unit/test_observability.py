"""Unit tests for logging and tracing helpers."""

import logging
from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest
from pythonjsonlogger.json import JsonFormatter

from order_catalog.observability import configure_logging, setup_observability, traced


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Put the root logger back the way pytest configured it."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers = handlers
    root_logger.setLevel(level)


@pytest.mark.unit
@pytest.mark.usefixtures("restore_root_logger")
class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_installs_json_formatter(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that the root logger gets a single JSON handler."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        configure_logging("DEBUG")

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, JsonFormatter)

    def test_environment_overrides_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that LOG_LEVEL takes precedence."""
        monkeypatch.setenv("LOG_LEVEL", "warning")

        configure_logging("DEBUG")

        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an invalid level name means INFO."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        configure_logging("CHATTY")

        assert logging.getLogger().level == logging.INFO


@pytest.mark.unit
class TestSetupObservability:
    """Test suite for setup_observability."""

    def test_exporters_skipped_in_test_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that no OTLP exporter is created when ENVIRONMENT=test."""
        monkeypatch.setenv("ENVIRONMENT", "test")

        with (
            patch("order_catalog.observability.config.setup_tracing") as setup_tracing,
            patch("order_catalog.observability.config.setup_metrics") as setup_metrics,
        ):
            setup_observability(enable_exporters=True)

        setup_tracing.assert_not_called()
        setup_metrics.assert_not_called()

    def test_exporters_enabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that exporters are configured outside the test environment."""
        monkeypatch.setenv("ENVIRONMENT", "production")

        with (
            patch("order_catalog.observability.config.setup_tracing") as setup_tracing,
            patch("order_catalog.observability.config.setup_metrics") as setup_metrics,
        ):
            setup_observability(enable_exporters=True)

        setup_tracing.assert_called_once()
        setup_metrics.assert_called_once()


@pytest.mark.unit
class TestTraced:
    """Test suite for the traced decorator."""

    @pytest.fixture
    def span(self) -> Iterator[MagicMock]:
        """Patch the tracer and yield the span it hands out."""
        with patch("order_catalog.observability.decorators.trace.get_tracer") as get_tracer:
            tracer = get_tracer.return_value
            yield tracer.start_as_current_span.return_value.__enter__.return_value

    def test_success_recorded(self, span: MagicMock) -> None:
        """Test that a successful call is marked on the span."""

        @traced("compute")
        def compute(x: int) -> int:
            return x * 2

        assert compute(21) == 42
        span.set_attribute.assert_any_call("success", True)
        span.set_attribute.assert_any_call("function.name", "compute")

    def test_exception_recorded_and_reraised(self, span: MagicMock) -> None:
        """Test that errors are recorded and propagated."""

        @traced()
        def explode() -> None:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            explode()

        span.set_attribute.assert_any_call("success", False)
        span.set_attribute.assert_any_call("error.type", "RuntimeError")
        span.record_exception.assert_called_once()

    def test_wraps_preserves_name(self) -> None:
        """Test that the wrapped function keeps its metadata."""

        @traced()
        def documented() -> None:
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."
