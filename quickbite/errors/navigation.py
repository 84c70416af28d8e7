"""
Navigation error classifications for the session navigator.

Raised by the pure transition resolver when a trigger cannot be applied to
the current screen. The navigator converts them into rejected results, so a
bad trigger never changes session state.
"""

from typing import Any, Dict, Optional


class NavigationError(Exception):
    """Base class for rejected navigation requests."""

    def __init__(self, message: str, current_screen: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.current_screen = current_screen
        self.context = context or {}
        self.recoverable = True


class InvalidTriggerError(NavigationError):
    """Trigger is not listed for the current screen."""

    def __init__(self, message: str, trigger: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.trigger = trigger


class MissingPayloadError(NavigationError):
    """Trigger requires a payload (such as a restaurant id) that was not given."""

    def __init__(self, message: str, trigger: Optional[str] = None,
                 payload_field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.trigger = trigger
        self.payload_field = payload_field


class EmptyHistoryError(NavigationError):
    """Back navigation requested with no prior screen to return to."""


class SessionClosedError(NavigationError):
    """Navigation requested after the session was closed."""
