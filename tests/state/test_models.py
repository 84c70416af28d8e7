"""Tests for navigation data models."""

import pytest

from quickbite.state.models import NavigationResult, Screen, ScreenId, SessionState


class TestScreenId:
    """Test ScreenId payload rules."""

    def test_menu_requires_restaurant_id(self):
        with pytest.raises(ValueError):
            ScreenId(Screen.MENU)

    def test_other_screens_reject_payload(self):
        with pytest.raises(ValueError):
            ScreenId(Screen.CART, restaurant_id=3)

    def test_menu_equality_includes_payload(self):
        assert ScreenId.menu(3) == ScreenId(Screen.MENU, 3)
        assert ScreenId.menu(3) != ScreenId.menu(4)

    def test_str(self):
        assert str(ScreenId.menu(3)) == "menu/3"
        assert str(ScreenId(Screen.ORDER_HISTORY)) == "order_history"


class TestSessionState:
    """Test SessionState helpers."""

    def test_initial_state_has_no_history(self):
        state = SessionState(current=ScreenId(Screen.SPLASH))

        assert state.history == ()
        assert state.can_go_back is False
        assert state.back_stack == (ScreenId(Screen.SPLASH),)

    def test_from_stack_round_trip(self):
        stack = (ScreenId(Screen.HOME), ScreenId.menu(1), ScreenId(Screen.CART))

        state = SessionState.from_stack(stack)

        assert state.current == ScreenId(Screen.CART)
        assert state.back_stack == stack
        assert state.can_go_back is True


class TestNavigationResult:
    """Test NavigationResult truthiness."""

    def test_truthiness_follows_accepted(self):
        home = ScreenId(Screen.HOME)

        assert NavigationResult(True, "open_cart", home, ScreenId(Screen.CART))
        assert not NavigationResult(False, "checkout", home, home, reason="nope")
