"""Input validation for the dashboard, CLI and API surfaces."""

from .sanitizer import InputSanitizer

__all__ = [
    "InputSanitizer",
]
