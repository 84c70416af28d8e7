"""
Session navigation module.

Manages the screen state machine for an order session: the transition table,
back-stack eviction, the splash timeout and the checkout sub-flow.
Splash -> Login -> Home -> Menu -> Cart -> Checkout -> Payment -> Success -> Home.
"""
from .auth import AuthFlowController
from .checkout import CheckoutFlowController
from .forms import CardPaymentDetails, LoginForm, ProfileForm, SignupForm
from .machine import SessionNavigator
from .models import NavigationResult, Screen, ScreenId, SessionState, Trigger
from .splash import SplashTimeout, TimeoutStatus

__all__ = [
    "AuthFlowController",
    "CardPaymentDetails",
    "CheckoutFlowController",
    "LoginForm",
    "NavigationResult",
    "ProfileForm",
    "Screen",
    "ScreenId",
    "SessionNavigator",
    "SessionState",
    "SignupForm",
    "SplashTimeout",
    "TimeoutStatus",
    "Trigger",
]
