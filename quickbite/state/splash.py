"""
Cancelable one-shot splash timeout.

The task fires its callback at most once. Cancelling before it fires
guarantees the callback never runs; cancelling afterwards is harmless.
"""

import threading
from enum import Enum
from typing import Any, Callable, Optional

import structlog

logger = structlog.get_logger(__name__)

TimerFactory = Callable[[float, Callable[[], None]], Any]


class TimeoutStatus(str, Enum):
    """Lifecycle of a splash timeout."""
    IDLE = "idle"
    SCHEDULED = "scheduled"
    FIRED = "fired"
    CANCELLED = "cancelled"


def _thread_timer(delay: float, callback: Callable[[], None]) -> threading.Timer:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    return timer


class SplashTimeout:
    """Schedules a callback once after a fixed delay."""

    def __init__(
        self,
        delay_seconds: float,
        callback: Callable[[], None],
        timer_factory: Optional[TimerFactory] = None
    ):
        self.delay_seconds = delay_seconds
        self.logger = logger
        self._callback = callback
        self._timer_factory = timer_factory or _thread_timer
        self._timer: Any = None
        self._status = TimeoutStatus.IDLE
        self._lock = threading.Lock()

    @property
    def status(self) -> TimeoutStatus:
        return self._status

    @property
    def is_pending(self) -> bool:
        return self._status == TimeoutStatus.SCHEDULED

    def start(self) -> bool:
        """Schedule the timeout. Only an idle task can be started."""
        with self._lock:
            if self._status != TimeoutStatus.IDLE:
                return False
            self._timer = self._timer_factory(self.delay_seconds, self._fire)
            self._status = TimeoutStatus.SCHEDULED

        self._timer.start()
        self.logger.debug("Splash timeout scheduled", delay_seconds=self.delay_seconds)
        return True

    def cancel(self) -> bool:
        """Prevent the callback from running. Returns True if it was pending."""
        with self._lock:
            if self._status not in (TimeoutStatus.IDLE, TimeoutStatus.SCHEDULED):
                return False
            self._status = TimeoutStatus.CANCELLED
            timer = self._timer

        if timer is not None:
            timer.cancel()
        self.logger.debug("Splash timeout cancelled")
        return True

    def _fire(self) -> None:
        with self._lock:
            if self._status != TimeoutStatus.SCHEDULED:
                return
            self._status = TimeoutStatus.FIRED

        self.logger.debug("Splash timeout fired")
        self._callback()
