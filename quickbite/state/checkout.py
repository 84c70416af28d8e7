"""
Checkout flow controller.

A narrow view over the navigator limited to Checkout, the two payment screens
and Success. Payment details are accepted exactly as entered, empty fields
included; nothing here validates or settles a payment.
"""

from typing import Optional

from ..logging.config import get_state_logger
from .forms import CardPaymentDetails
from .machine import SessionNavigator
from .models import NavigationResult, Screen, Trigger

state_logger = get_state_logger(__name__)

CHECKOUT_SCREENS = frozenset({
    Screen.CHECKOUT,
    Screen.CASH_PAYMENT,
    Screen.CARD_PAYMENT,
    Screen.SUCCESS,
})


class CheckoutFlowController:
    """Drives Checkout -> {CashPayment | CardPayment} -> Success -> Home."""

    def __init__(self, navigator: SessionNavigator):
        self.navigator = navigator
        self.state_logger = state_logger

    @property
    def is_active(self) -> bool:
        """Whether the session is currently inside the checkout flow."""
        return self.navigator.current.screen in CHECKOUT_SCREENS

    def choose_cash(self) -> NavigationResult:
        return self.navigator.dispatch(Trigger.CHOOSE_CASH)

    def choose_card(self) -> NavigationResult:
        return self.navigator.dispatch(Trigger.CHOOSE_CARD)

    def confirm_cash_payment(self) -> NavigationResult:
        """Confirm from the cash screen."""
        if self.navigator.current.screen != Screen.CASH_PAYMENT:
            return self._reject_wrong_screen(Screen.CASH_PAYMENT)
        return self.navigator.dispatch(Trigger.CONFIRM_PAYMENT)

    def confirm_card_payment(self, details: Optional[CardPaymentDetails] = None) -> NavigationResult:
        """
        Confirm from the card screen.

        Any details are accepted, including none at all. They are not
        inspected or retained.
        """
        if self.navigator.current.screen != Screen.CARD_PAYMENT:
            return self._reject_wrong_screen(Screen.CARD_PAYMENT)
        return self.navigator.dispatch(Trigger.CONFIRM_PAYMENT)

    def go_home(self) -> NavigationResult:
        """Leave Success for a fresh Home root."""
        return self.navigator.dispatch(Trigger.GO_HOME)

    def _reject_wrong_screen(self, expected: Screen) -> NavigationResult:
        current = self.navigator.current
        reason = f"Payment confirmation expected on {expected.value}, session is on {current}"
        self.state_logger.warning(
            "Rejected payment confirmation",
            session_id=self.navigator.session_id,
            expected_screen=expected.value,
            current_screen=str(current)
        )
        return NavigationResult(
            accepted=False,
            trigger=Trigger.CONFIRM_PAYMENT.value,
            previous=current,
            current=current,
            reason=reason
        )
