"""
Navigation data models for the order session state machine.

This module defines the screen identities, the triggers that move between
them, and immutable snapshots of the navigator's back stack.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Screen(str, Enum):
    """Screen kinds a session can show."""
    SPLASH = "splash"
    LOGIN = "login"
    SIGNUP = "signup"
    HOME = "home"
    MENU = "menu"
    CART = "cart"
    PROFILE = "profile"
    ORDER_HISTORY = "order_history"
    CHECKOUT = "checkout"
    CASH_PAYMENT = "cash_payment"
    CARD_PAYMENT = "card_payment"
    SUCCESS = "success"


class Trigger(str, Enum):
    """User actions and timer events that request a transition."""
    SPLASH_TIMEOUT = "splash_timeout"
    SUBMIT_LOGIN = "submit_login"
    OPEN_SIGNUP = "open_signup"
    SUBMIT_SIGNUP = "submit_signup"
    BACK_TO_LOGIN = "back_to_login"
    SELECT_RESTAURANT = "select_restaurant"
    OPEN_CART = "open_cart"
    OPEN_PROFILE = "open_profile"
    OPEN_ORDER_HISTORY = "open_order_history"
    VIEW_CART = "view_cart"
    CHECKOUT = "checkout"
    CHOOSE_CASH = "choose_cash"
    CHOOSE_CARD = "choose_card"
    CONFIRM_PAYMENT = "confirm_payment"
    GO_HOME = "go_home"


@dataclass(frozen=True)
class ScreenId:
    """A screen kind plus its payload; only MENU carries a restaurant id."""

    screen: Screen
    restaurant_id: Optional[int] = None

    def __post_init__(self) -> None:
        if self.screen == Screen.MENU:
            if not isinstance(self.restaurant_id, int) or isinstance(self.restaurant_id, bool):
                raise ValueError("Menu screen requires an integer restaurant_id")
        elif self.restaurant_id is not None:
            raise ValueError(f"Screen {self.screen.value} does not take a restaurant_id")

    @classmethod
    def menu(cls, restaurant_id: int) -> "ScreenId":
        return cls(Screen.MENU, restaurant_id)

    def __str__(self) -> str:
        if self.screen == Screen.MENU:
            return f"{self.screen.value}/{self.restaurant_id}"
        return self.screen.value


@dataclass(frozen=True)
class TransitionRule:
    """One row of the transition table."""

    source: Screen
    trigger: Trigger
    target: Screen

    # Pop the back stack (current screen included) until this screen kind has
    # been removed. None means the transition is a plain push.
    pop_up_to: Optional[Screen] = None


@dataclass(frozen=True)
class SessionState:
    """Current screen plus the prior screens retained for back navigation."""

    current: ScreenId
    history: tuple[ScreenId, ...] = ()

    @property
    def back_stack(self) -> tuple[ScreenId, ...]:
        """History followed by the current screen, bottom to top."""
        return self.history + (self.current,)

    @property
    def can_go_back(self) -> bool:
        return bool(self.history)

    @classmethod
    def from_stack(cls, stack: tuple[ScreenId, ...]) -> "SessionState":
        return cls(current=stack[-1], history=stack[:-1])


@dataclass(frozen=True)
class NavigationResult:
    """Outcome of a navigation request; rejected requests leave state unchanged."""

    accepted: bool
    trigger: str
    previous: ScreenId
    current: ScreenId

    # Entries popped off the back stack by this request, bottom to top
    evicted: tuple[ScreenId, ...] = ()
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.accepted
