"""
Minimal subscribe/publish channel for change notification.

The cart store and the navigator own plain data; a presentation layer reacts
to their changes by subscribing here instead of polling.
"""

from collections import deque
from typing import Callable, Generic, TypeVar

import structlog

T = TypeVar("T")

logger = structlog.get_logger(__name__)


class Observable(Generic[T]):
    """
    Ordered list of callbacks invoked with each published value.

    A value published from inside a callback is queued and delivered once the
    current round has reached every subscriber, so all subscribers observe
    values in publish order and the last value each one sees is the latest.
    """

    def __init__(self, name: str):
        self.name = name
        self.logger = logger
        self._subscribers: list[Callable[[T], None]] = []
        self._pending: deque[T] = deque()
        self._delivering = False

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register a callback and return a function that unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, value: T) -> None:
        """Deliver a value to every subscriber in subscription order."""
        self._pending.append(value)
        if self._delivering:
            return

        self._delivering = True
        try:
            while self._pending:
                current = self._pending.popleft()
                # Iterate over a copy so callbacks may unsubscribe themselves.
                for callback in list(self._subscribers):
                    self._deliver(callback, current)
        finally:
            self._delivering = False

    def clear(self) -> None:
        """Drop all subscribers and anything still queued for them."""
        self._subscribers.clear()
        self._pending.clear()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def _deliver(self, callback: Callable[[T], None], value: T) -> None:
        try:
            callback(value)
        except Exception as e:
            self.logger.error(
                "Subscriber failed",
                channel=self.name,
                callback=getattr(callback, "__name__", repr(callback)),
                error=str(e)
            )
