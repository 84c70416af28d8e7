"""End-to-end tests for an order session."""

from decimal import Decimal
from unittest.mock import patch

import pytest

from quickbite import start_session
from quickbite.config.defaults import get_default_config
from quickbite.session import OrderSession
from quickbite.state.forms import CardPaymentDetails, LoginForm
from quickbite.state.models import Screen, ScreenId, Trigger
from quickbite.state.splash import TimeoutStatus


class TestSplashLifecycle:
    """Test the splash timeout bound to the session lifetime."""

    def test_session_starts_on_splash_with_timer_armed(self, session, timer_factory):
        assert session.navigator.current == ScreenId(Screen.SPLASH)
        assert timer_factory.last.started
        assert timer_factory.last.delay == 2.0

    def test_timeout_moves_to_login_and_evicts_splash(self, session, timer_factory):
        timer_factory.last.fire()

        assert session.navigator.current == ScreenId(Screen.LOGIN)
        assert not session.navigator.back().accepted
        assert session.splash_timeout.status == TimeoutStatus.FIRED

    def test_close_before_timeout_prevents_firing(self, session, timer_factory):
        session.close()
        timer_factory.last.fire()

        assert session.navigator.current == ScreenId(Screen.SPLASH)
        assert timer_factory.last.cancelled
        assert session.closed

    def test_close_racing_the_timeout_keeps_splash(self, session, timer_factory):
        """Test a close landing between the timeout's closed check and its dispatch."""
        dispatch = session.navigator.dispatch
        results = []

        def close_then_dispatch(*args, **kwargs):
            session.close()
            results.append(dispatch(*args, **kwargs))
            return results[-1]

        with patch.object(session.navigator, "dispatch", side_effect=close_then_dispatch):
            timer_factory.last.fire()

        assert session.navigator.current == ScreenId(Screen.SPLASH)
        assert len(results) == 1
        assert not results[0].accepted

    def test_close_is_idempotent(self, session):
        session.close()
        session.close()

        assert session.splash_timeout.status == TimeoutStatus.CANCELLED

    def test_leaving_splash_otherwise_cancels_timer(self, timer_factory):
        """Test any exit from Splash cancels the pending timeout."""
        session = OrderSession(get_default_config(), timer_factory=timer_factory)
        session.start()

        session.navigator.dispatch(Trigger.SPLASH_TIMEOUT)

        assert timer_factory.last.cancelled
        assert session.splash_timeout.status == TimeoutStatus.CANCELLED
        session.close()

    def test_context_manager_closes(self, timer_factory):
        with OrderSession(get_default_config(), timer_factory=timer_factory) as session:
            session.start()

        assert session.closed
        assert timer_factory.last.cancelled


class TestOrderScenarios:
    """Test complete order flows."""

    def test_card_checkout_round_trip(self, session, timer_factory):
        """Test Splash to Success and back to a fresh Home root."""
        nav = session.navigator

        timer_factory.last.fire()
        assert session.auth.submit_login(LoginForm("me@example.com", "pw")).accepted
        assert session.select_restaurant(3).accepted
        assert nav.dispatch(Trigger.VIEW_CART).accepted
        assert nav.dispatch(Trigger.CHECKOUT).accepted
        assert session.checkout.choose_card().accepted
        assert session.checkout.confirm_card_payment(CardPaymentDetails()).accepted
        assert nav.current == ScreenId(Screen.SUCCESS)
        assert session.checkout.go_home().accepted

        assert nav.current == ScreenId(Screen.HOME)
        assert nav.history == ()
        assert not nav.back().accepted

    def test_extra_cheese_via_menu(self, session, timer_factory):
        """Test adding from the current menu merges by item id."""
        timer_factory.last.fire()
        session.auth.submit_login()
        session.select_restaurant(1)

        session.add_menu_item(6, quantity=2)
        session.add_menu_item(6, quantity=1, customization="extra cheese")

        lines = session.cart.cart_contents()
        assert len(lines) == 1
        assert (lines[0].id, lines[0].quantity, lines[0].customization) == (6, 3, "extra cheese")
        assert session.cart.cart_total() == Decimal("29.97")

    def test_cart_survives_completed_order(self, session, timer_factory):
        """Test success does not clear the cart."""
        timer_factory.last.fire()
        session.auth.submit_login()
        session.select_restaurant(2)
        session.add_menu_item(1)
        session.navigator.dispatch(Trigger.VIEW_CART)
        session.navigator.dispatch(Trigger.CHECKOUT)
        session.checkout.choose_cash()
        session.checkout.confirm_cash_payment()
        session.checkout.go_home()

        assert session.cart.line_count == 1

    def test_add_outside_menu_is_ignored(self, session, timer_factory):
        timer_factory.last.fire()
        session.auth.submit_login()

        assert session.add_menu_item(6) is None
        assert session.cart.is_empty

    def test_unknown_restaurant_has_empty_menu(self, session, timer_factory):
        timer_factory.last.fire()
        session.auth.submit_login()

        assert session.select_restaurant(42).accepted
        assert session.current_menu() == []
        assert session.add_menu_item(6) is None

    def test_current_menu(self, session, timer_factory):
        timer_factory.last.fire()
        session.auth.submit_login()
        assert session.current_menu() == []

        session.select_restaurant(4)

        assert len(session.current_menu()) == 22

    def test_profile_edits_kept_for_session(self, session):
        session.save_profile(name="Jane Roe")

        assert session.profile.name == "Jane Roe"
        assert session.profile.address == "123 Main St"

    def test_search_restaurants(self, session):
        assert [r.name for r in session.search_restaurants("taco")] == ["Taco Haven"]


class TestStartSession:
    """Test the process entry point."""

    def test_start_session_with_overrides(self, tmp_path, timer_factory):
        session = start_session(
            config_dir=tmp_path,
            overrides={"session": {"splash_delay_seconds": 0.25}, "cart": {"default_quantity": 2}},
            timer_factory=timer_factory,
        )

        try:
            assert timer_factory.last.delay == 0.25
            assert session.splash_timeout.is_pending
            assert session.cart.default_quantity == 2
        finally:
            session.close()

    def test_start_session_without_timer(self, tmp_path, timer_factory):
        session = start_session(
            config_dir=tmp_path,
            overrides={"session": {"start_splash_timer": False}},
            timer_factory=timer_factory,
        )

        try:
            assert timer_factory.timers == []
            assert session.navigator.current == ScreenId(Screen.SPLASH)
        finally:
            session.close()

    def test_sessions_do_not_share_state(self, timer_factory):
        config = get_default_config()
        first = start_session(config=config, timer_factory=timer_factory)
        second = start_session(config=config, timer_factory=timer_factory)

        try:
            timer_factory.timers[0].fire()
            first.cart.add_to_cart(first.catalog.find_menu_item(1, 6), 1)

            assert first.navigator.current == ScreenId(Screen.LOGIN)
            assert second.navigator.current == ScreenId(Screen.SPLASH)
            assert second.cart.is_empty
            assert first.session_id != second.session_id
        finally:
            first.close()
            second.close()

    def test_real_timer_moves_to_login(self, tmp_path):
        """Test the default thread timer drives the transition."""
        import threading

        reached_login = threading.Event()
        session = start_session(config_dir=tmp_path, overrides={"session": {"splash_delay_seconds": 0.01}})
        session.navigator.subscribe(
            lambda state: reached_login.set() if state.current.screen == Screen.LOGIN else None
        )

        try:
            # The timer may already have fired before subscribing.
            assert reached_login.wait(timeout=2.0) or session.navigator.current == ScreenId(Screen.LOGIN)
            assert session.navigator.current == ScreenId(Screen.LOGIN)
        finally:
            session.close()

    def test_invalid_config_raises_before_session(self, tmp_path):
        from quickbite.errors import ConfigurationError

        with pytest.raises(ConfigurationError):
            start_session(config_dir=tmp_path, overrides={"logging": {"level": "CHATTY"}})
