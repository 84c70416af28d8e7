"""
Error classification for the order session controller.

Input quality errors are always recovered from by coercion. Navigation errors
are caught at the navigator boundary and reported as rejected results. Only
configuration errors may surface to the caller, and only at startup.
"""

from .input_quality import (
    InputQualityError,
    MalformedQuantityError,
)
from .navigation import (
    NavigationError,
    InvalidTriggerError,
    MissingPayloadError,
    EmptyHistoryError,
    SessionClosedError,
)
from .system_failures import (
    SystemFailureError,
    ConfigurationError,
)

__all__ = [
    # Input Quality Errors
    "InputQualityError",
    "MalformedQuantityError",
    # Navigation Errors
    "NavigationError",
    "InvalidTriggerError",
    "MissingPayloadError",
    "EmptyHistoryError",
    "SessionClosedError",
    # System Failures
    "SystemFailureError",
    "ConfigurationError",
]
