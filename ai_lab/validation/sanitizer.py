"""Input sanitization for values coming from the dashboard, CLI and API."""

from typing import Any, Optional, Union
import logging
import numbers

logger = logging.getLogger(__name__)


class InputSanitizer:
    """Sanitize raw user inputs before they reach the analysis core."""

    @staticmethod
    def sanitize_horizon(horizon: Union[int, float, str], min_days: int = 7, max_days: int = 60) -> Optional[int]:
        """Sanitize forecast horizon parameter.

        Args:
            horizon: Number of days to forecast
            min_days: Minimum allowed days
            max_days: Maximum allowed days

        Returns:
            Sanitized horizon or None if invalid. Floats are accepted only
            when they hold a whole number (30.0), never truncated.
        """
        if isinstance(horizon, bool):
            logger.warning(f"Horizon must be numeric, got bool: {horizon}")
            return None
        if isinstance(horizon, numbers.Real) and not isinstance(horizon, numbers.Integral):
            if not float(horizon).is_integer():
                logger.warning(f"Horizon must be a whole number of days, got {horizon}")
                return None
        try:
            h = int(horizon)
        except (ValueError, TypeError) as e:
            logger.warning(f"Cannot convert horizon to int: {e}")
            return None

        if h < min_days:
            logger.warning(f"Horizon {h} below minimum {min_days}")
            return None

        if h > max_days:
            logger.warning(f"Horizon {h} exceeds maximum {max_days}")
            return None

        return h

    @staticmethod
    def sanitize_text(text: Any, max_chars: Optional[int] = None) -> Optional[str]:
        """Sanitize a multi-line text buffer for sentiment scoring.

        Unlike a single-field string, the buffer is not stripped: line
        splitting and trimming belong to the scorer. An empty buffer is valid.

        Args:
            text: Raw pasted text
            max_chars: Maximum allowed length

        Returns:
            The text unchanged, or None if invalid
        """
        if not isinstance(text, str):
            logger.warning(f"Input is not a string: {type(text)}")
            return None

        if max_chars and len(text) > max_chars:
            logger.warning(f"Text length {len(text)} exceeds maximum {max_chars}")
            return None

        return text
