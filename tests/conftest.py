"""Pytest configuration and shared fixtures."""

from decimal import Decimal
from typing import Callable

import pytest

from quickbite.cart.store import CartStore
from quickbite.catalog.models import MenuItem
from quickbite.catalog.provider import StaticCatalogProvider
from quickbite.config.defaults import get_default_config
from quickbite.session import OrderSession
from quickbite.state.machine import SessionNavigator
from quickbite.state.models import Screen, ScreenId, Trigger


class FakeTimer:
    """Stand-in for threading.Timer that only fires when told to."""

    def __init__(self, delay: float, callback: Callable[[], None]):
        self.delay = delay
        self.callback = callback
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        """Simulate the delay elapsing, as threading.Timer would if not cancelled."""
        if self.started and not self.cancelled:
            self.callback()


class FakeTimerFactory:
    """Records every timer created so tests can fire them."""

    def __init__(self):
        self.timers: list[FakeTimer] = []

    def __call__(self, delay: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def last(self) -> FakeTimer:
        return self.timers[-1]


@pytest.fixture
def timer_factory() -> FakeTimerFactory:
    return FakeTimerFactory()


@pytest.fixture
def catalog() -> StaticCatalogProvider:
    return StaticCatalogProvider()


@pytest.fixture
def margherita() -> MenuItem:
    return MenuItem(6, "Margherita Pizza", "Classic pizza with tomato sauce.", Decimal("9.99"))


@pytest.fixture
def cold_brew() -> MenuItem:
    return MenuItem(22, "Cold Brew Coffee", "Smooth and strong cold brew coffee served over ice.", Decimal("3.99"))


@pytest.fixture
def cart() -> CartStore:
    return CartStore()


@pytest.fixture
def navigator() -> SessionNavigator:
    return SessionNavigator(session_id="test-session")


@pytest.fixture
def home_navigator() -> SessionNavigator:
    """Navigator that has already passed the authentication gate."""
    nav = SessionNavigator(session_id="test-session")
    nav.dispatch(Trigger.SPLASH_TIMEOUT)
    nav.dispatch(Trigger.SUBMIT_LOGIN)
    assert nav.current == ScreenId(Screen.HOME)
    return nav


@pytest.fixture
def session(timer_factory: FakeTimerFactory):
    order_session = OrderSession(get_default_config(), timer_factory=timer_factory, session_id="test-session")
    order_session.start()
    yield order_session
    order_session.close()
