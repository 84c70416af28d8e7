"""Tests for the error taxonomy and the never-fatal policy."""

import pytest

from quickbite.errors import (
    ConfigurationError,
    EmptyHistoryError,
    InputQualityError,
    InvalidTriggerError,
    MalformedQuantityError,
    MissingPayloadError,
    NavigationError,
    SessionClosedError,
    SystemFailureError,
)
from quickbite.state.machine import SessionNavigator
from quickbite.state.models import Screen, ScreenId, Trigger

class TestErrorHierarchy:
    """Test error classification."""

    def test_input_quality_errors_are_recoverable(self):
        error = MalformedQuantityError("bad", raw_value="x", context={"field": "quantity"})

        assert isinstance(error, InputQualityError)
        assert error.recoverable is True
        assert error.context == {"field": "quantity"}

    @pytest.mark.parametrize(
        "error_cls", [InvalidTriggerError, MissingPayloadError, EmptyHistoryError, SessionClosedError]
    )
    def test_navigation_errors_share_base(self, error_cls):
        error = error_cls("rejected", current_screen="home")

        assert isinstance(error, NavigationError)
        assert error.recoverable is True
        assert error.current_screen == "home"

    def test_configuration_error_is_unrecoverable(self):
        error = ConfigurationError("bad config", errors=["x"], source="session.yaml")

        assert isinstance(error, SystemFailureError)
        assert error.recoverable is False
        assert error.source == "session.yaml"


ALL_SCREENS = [ScreenId.menu(1) if screen == Screen.MENU else ScreenId(screen) for screen in Screen]


class TestNeverFatal:
    """Test that no user action can raise out of the core."""

    @pytest.mark.parametrize("screen", ALL_SCREENS, ids=str)
    def test_every_trigger_from_every_screen(self, screen):
        """Test dispatching any trigger anywhere either applies or leaves state unchanged."""
        for trigger in Trigger:
            nav = SessionNavigator(initial=screen)
            before = nav.state

            result = nav.dispatch(trigger)

            if not result.accepted:
                assert nav.state == before
                assert result.reason

    def test_back_on_fresh_root_is_rejected_not_raised(self, home_navigator):
        result = home_navigator.back()

        assert not result.accepted
        assert "No screen to return to" in result.reason
        assert home_navigator.current == ScreenId(Screen.HOME)

    def test_garbage_cart_input_is_absorbed(self, cart, margherita):
        for raw in (None, "", "-1", object(), [], {}, float("nan")):
            cart.add_to_cart(margherita, raw, None)

        assert cart.get_line(6).quantity == 7
        assert cart.get_line(6).customization == ""
