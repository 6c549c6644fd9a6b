# tests/test_error_logging.py
"""
Tests for error logging framework.

Tests:
- ErrorLogger initialization and logging
- Component tagging
- Fallback reason tracking
- Error summary generation
"""

import logging
from unittest.mock import MagicMock

import pytest

from ai_lab.monitoring.error_logging import ErrorComponent, ErrorLogger, FallbackReason


class TestErrorComponent:
    """Test ErrorComponent enum values."""

    def test_ingestion_component(self):
        assert ErrorComponent.INGESTION.value == "ingestion"

    def test_sentiment_panel_component(self):
        assert ErrorComponent.SENTIMENT_PANEL.value == "sentiment_panel"

    def test_forecasting_api_component(self):
        assert ErrorComponent.FORECASTING_API.value == "forecasting_api"


class TestErrorLogger:
    """Test ErrorLogger behavior."""

    def test_default_logger_name(self):
        errors = ErrorLogger(component=ErrorComponent.INGESTION)
        assert errors.logger.name == "ai_lab.error.ingestion"
        assert errors.error_count == 0
        assert errors.fallback_count == 0

    def test_log_fallback_records_entry(self):
        base = MagicMock(spec=logging.Logger)
        errors = ErrorLogger(component=ErrorComponent.INGESTION, base_logger=base)

        errors.log_fallback(
            reason=FallbackReason.MISSING_COLUMN,
            context={"columns": ["volume"]},
            fallback_action="No observations produced",
        )

        assert errors.fallback_count == 1
        entry = errors.error_history[-1]
        assert entry["reason"] == "missing_column"
        assert entry["component"] == "ingestion"
        assert entry["fallback_action"] == "No observations produced"
        base.warning.assert_called_once()
        assert "[INGESTION]" in base.warning.call_args[0][0]

    def test_log_fallback_with_exception(self):
        errors = ErrorLogger(component=ErrorComponent.INGESTION, base_logger=MagicMock())
        errors.log_fallback(reason=FallbackReason.CORRUPT_DATA, exception=ValueError("bad bytes"))

        entry = errors.error_history[-1]
        assert entry["exception_type"] == "ValueError"
        assert entry["exception_message"] == "bad bytes"
        assert entry["fallback_action"] == "No action"

    @pytest.mark.parametrize("severity", ["info", "warning", "error"])
    def test_log_error_uses_severity(self, severity):
        base = MagicMock(spec=logging.Logger)
        errors = ErrorLogger(component=ErrorComponent.FORECASTING_API, base_logger=base)

        errors.log_error("Uploaded CSV could not be parsed", context={"file": "x.csv"}, severity=severity)

        getattr(base, severity).assert_called_once()
        assert errors.error_count == 1
        assert errors.error_history[-1]["severity"] == severity

    def test_log_error_unknown_severity_falls_back_to_warning(self):
        base = MagicMock(spec=logging.Logger)
        errors = ErrorLogger(component=ErrorComponent.INGESTION, base_logger=base)
        errors.log_error("odd", severity="loud")
        base.warning.assert_called_once()

    def test_error_summary(self):
        errors = ErrorLogger(component=ErrorComponent.SENTIMENT_PANEL, base_logger=MagicMock())
        for i in range(12):
            errors.log_error(f"error {i}")
        errors.log_fallback(reason=FallbackReason.INVALID_INPUT)

        summary = errors.get_error_summary()
        assert summary["component"] == "sentiment_panel"
        assert summary["total_errors"] == 12
        assert summary["total_fallbacks"] == 1
        assert len(summary["recent_errors"]) == 10
        assert summary["recent_errors"][-1]["reason"] == "invalid_input"

    def test_clear_history(self):
        errors = ErrorLogger(component=ErrorComponent.INGESTION, base_logger=MagicMock())
        errors.log_error("one")
        errors.clear_history()
        assert errors.error_history == []
        assert errors.error_count == 1
