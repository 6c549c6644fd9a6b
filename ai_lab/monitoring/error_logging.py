# ai_lab/monitoring/error_logging.py
"""
Error Logging Framework for AI Lab.

Gives skipped rows and no-op fallbacks an explicit, component-tagged log
record instead of silently discarding them. Records are kept in memory only.
"""

import logging
from typing import Dict, Any, Optional
from datetime import datetime, timezone
from enum import Enum


class ErrorComponent(Enum):
    """Component identifiers for error tracking."""
    INGESTION = "ingestion"
    SENTIMENT_PANEL = "sentiment_panel"
    FORECASTING_API = "forecasting_api"


class FallbackReason(Enum):
    """Reasons why a fallback was taken."""
    INVALID_INPUT = "invalid_input"
    CORRUPT_DATA = "corrupt_data"
    INSUFFICIENT_DATA = "insufficient_data"
    MISSING_COLUMN = "missing_column"


class ErrorLogger:
    """
    Structured error logging with component tagging and fallback tracking.

    Usage:
        errors = ErrorLogger(component=ErrorComponent.INGESTION)
        if not observations:
            errors.log_fallback(
                reason=FallbackReason.INSUFFICIENT_DATA,
                context={"rows": len(df)},
                fallback_action="Keeping previously loaded observations",
            )
    """

    def __init__(self, component: ErrorComponent, base_logger: Optional[logging.Logger] = None):
        """
        Initialize error logger for a specific component.

        Args:
            component: ErrorComponent enum identifying the component
            base_logger: Optional logging.Logger to use (creates default if None)
        """
        self.component = component
        self.logger = base_logger or logging.getLogger(f"ai_lab.error.{component.value}")

        self.error_count = 0
        self.fallback_count = 0
        self.error_history: list[Dict[str, Any]] = []

    def log_fallback(
        self,
        reason: FallbackReason,
        exception: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None,
        fallback_action: Optional[str] = None,
    ) -> None:
        """
        Log an event where the caller fell back instead of failing.

        Args:
            reason: FallbackReason enum indicating why fallback occurred
            exception: Optional exception that triggered the fallback
            context: Optional context dict (file, rows, horizon, etc.)
            fallback_action: Optional description of fallback action taken
        """
        self.fallback_count += 1

        self.error_history.append({
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "component": self.component.value,
            "reason": reason.value,
            "exception_type": type(exception).__name__ if exception else None,
            "exception_message": str(exception) if exception else None,
            "context": context or {},
            "fallback_action": fallback_action or "No action",
        })

        context_str = ", ".join(f"{k}={v}" for k, v in (context or {}).items())
        exc_str = f": {exception}" if exception else ""

        self.logger.warning(
            f"[{self.component.value.upper()}] "
            f"Fallback triggered ({reason.value}){exc_str} "
            f"| Context: {context_str} "
            f"| Action: {fallback_action or 'No action'}"
        )

    def log_error(
        self,
        error_msg: str,
        exception: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None,
        severity: str = "warning",
    ) -> None:
        """
        Log a recoverable error (a skipped row, a rejected input).

        Args:
            error_msg: Description of the error
            exception: Optional exception object
            context: Optional context dict
            severity: 'debug', 'info', 'warning', 'error', 'critical'
        """
        self.error_count += 1

        self.error_history.append({
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "component": self.component.value,
            "message": error_msg,
            "exception_type": type(exception).__name__ if exception else None,
            "exception_message": str(exception) if exception else None,
            "context": context or {},
            "severity": severity,
        })

        log_func = getattr(self.logger, severity, self.logger.warning)
        context_str = ", ".join(f"{k}={v}" for k, v in (context or {}).items())
        log_func(f"[{self.component.value.upper()}] {error_msg} | Context: {context_str}")

    def get_error_summary(self) -> Dict[str, Any]:
        """Get summary statistics of errors logged by this component."""
        return {
            "component": self.component.value,
            "total_errors": self.error_count,
            "total_fallbacks": self.fallback_count,
            "recent_errors": self.error_history[-10:],
        }

    def clear_history(self) -> None:
        """Clear in-memory error history."""
        self.error_history.clear()

