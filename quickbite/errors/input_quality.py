"""
Input quality error classifications for user-entered values.

These exceptions describe malformed user input. They are always handled by
falling back to a safe default; callers never see them.
"""

from typing import Any, Dict, Optional


class InputQualityError(Exception):
    """Base class for malformed input that is coerced to a safe default."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MalformedQuantityError(InputQualityError):
    """Quantity entry that is not a positive whole number."""

    def __init__(self, message: str, raw_value: Any = None,
                 fallback: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_value = raw_value
        self.fallback = fallback
