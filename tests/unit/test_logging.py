"""Tests for logging configuration and validation decision records."""

from unittest.mock import Mock

import structlog

from ico_app.logging import configure_logging, get_logger
from ico_app.logging.config import get_validation_logger, log_validation_decision


class TestLoggingConfiguration:
    """Test structlog configuration."""

    def test_configure_logging_console(self) -> None:
        configure_logging(level="DEBUG")
        assert structlog.is_configured()

        logger = get_logger("test")
        logger.info("Test message", key="value")

    def test_configure_logging_json(self) -> None:
        configure_logging(level="INFO", format_json=True, include_caller=True)
        get_validation_logger("test").info("Test message")


class TestValidationDecision:
    """Test log_validation_decision output."""

    def test_passed_decision(self) -> None:
        logger = Mock()
        bound = logger.bind.return_value

        log_validation_decision(logger, "allocation_table", True, "plan", "sums to 100%")

        logger.bind.assert_called_once_with(
            check_name="allocation_table",
            check_result="PASS",
            subject="plan",
            reason="sums to 100%",
        )
        bound.info.assert_called_once_with("Validation passed")
        bound.warning.assert_not_called()

    def test_failed_decision_with_context(self) -> None:
        logger = Mock()
        bound = logger.bind.return_value
        with_context = bound.bind.return_value

        log_validation_decision(logger, "allocation_table", False, "plan", "1 issue(s)",
                                context={"total": 90})

        assert logger.bind.call_args.kwargs["check_result"] == "FAIL"
        bound.bind.assert_called_once_with(context={"total": 90})
        with_context.warning.assert_called_once_with("Validation failed")
