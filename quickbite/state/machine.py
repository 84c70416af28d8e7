"""
Session navigator: the stack-based screen state machine.

This module owns the session's back stack and applies the transition table.
Invalid triggers are rejected and reported as a rejected NavigationResult;
they never raise and never change the current screen.
"""

import threading
import uuid
from typing import Callable, Optional, Union

from ..errors import NavigationError, SessionClosedError
from ..logging.config import get_state_logger, log_state_transition
from ..utils.observable import Observable
from .models import NavigationResult, Screen, ScreenId, SessionState, Trigger
from .transitions import allowed_triggers, resolve_back, resolve_transition

state_logger = get_state_logger(__name__)

BACK = "back"


class SessionNavigator:
    """Screen state machine for one session, starting at Splash."""

    def __init__(self, session_id: Optional[str] = None,
                 initial: Optional[ScreenId] = None):
        self.session_id = session_id or uuid.uuid4().hex[:12]
        self.state_logger = state_logger
        self._state = SessionState(current=initial or ScreenId(Screen.SPLASH))
        self._changes: Observable[SessionState] = Observable("navigation")
        # The splash timeout fires on a timer thread.
        self._lock = threading.RLock()
        self._closed = False

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def current(self) -> ScreenId:
        return self._state.current

    @property
    def history(self) -> tuple[ScreenId, ...]:
        return self._state.history

    @property
    def can_go_back(self) -> bool:
        return self._state.can_go_back

    @property
    def closed(self) -> bool:
        return self._closed

    def allowed_triggers(self) -> list[Trigger]:
        """Triggers accepted from the current screen."""
        return allowed_triggers(self._state.current.screen)

    def dispatch(
        self,
        trigger: Union[Trigger, str],
        restaurant_id: Optional[int] = None
    ) -> NavigationResult:
        """
        Apply a trigger to the current screen.

        Args:
            trigger: Requested trigger (enum member or its string value)
            restaurant_id: Payload for SELECT_RESTAURANT

        Returns:
            Accepted result with the new screen, or a rejected result with
            the unchanged screen and the reason
        """
        trigger_name = trigger.value if isinstance(trigger, Trigger) else str(trigger)

        with self._lock:
            previous = self._state
            try:
                self._ensure_open()
                new_state, evicted = resolve_transition(previous, trigger, restaurant_id)
            except NavigationError as e:
                return self._reject(trigger_name, e)

            self._state = new_state
            self._log_transition(previous, new_state, trigger_name, evicted)
            self._changes.publish(new_state)

        return NavigationResult(
            accepted=True,
            trigger=trigger_name,
            previous=previous.current,
            current=new_state.current,
            evicted=evicted
        )

    def back(self) -> NavigationResult:
        """Return to the previous screen; rejected when the history is empty."""
        with self._lock:
            previous = self._state
            try:
                self._ensure_open()
                new_state = resolve_back(previous)
            except NavigationError as e:
                return self._reject(BACK, e)

            self._state = new_state
            self._log_transition(previous, new_state, BACK, (previous.current,))
            self._changes.publish(new_state)

        return NavigationResult(
            accepted=True,
            trigger=BACK,
            previous=previous.current,
            current=new_state.current,
            evicted=(previous.current,)
        )

    def subscribe(self, callback: Callable[[SessionState], None]) -> Callable[[], None]:
        """Be notified with the new state after every accepted transition."""
        return self._changes.subscribe(callback)

    def close(self) -> None:
        """Stop accepting navigation and drop all subscribers."""
        with self._lock:
            self._closed = True
            self._changes.clear()

    def _ensure_open(self) -> None:
        if self._closed:
            raise SessionClosedError(
                "Session is closed",
                current_screen=str(self._state.current)
            )

    def _reject(self, trigger_name: str, error: NavigationError) -> NavigationResult:
        self.state_logger.warning(
            "Rejected navigation request",
            session_id=self.session_id,
            trigger=trigger_name,
            current_screen=str(self._state.current),
            error_type=type(error).__name__,
            reason=str(error)
        )
        return NavigationResult(
            accepted=False,
            trigger=trigger_name,
            previous=self._state.current,
            current=self._state.current,
            reason=str(error)
        )

    def _log_transition(
        self,
        previous: SessionState,
        new_state: SessionState,
        trigger_name: str,
        evicted: tuple[ScreenId, ...]
    ) -> None:
        log_state_transition(
            self.state_logger,
            session_id=self.session_id,
            from_screen=str(previous.current),
            to_screen=str(new_state.current),
            trigger=trigger_name,
            context={
                "history_depth": len(new_state.history),
                "evicted": [str(screen) for screen in evicted],
            }
        )
