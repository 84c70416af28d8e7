"""
Authentication placeholders.

Login and signup accept any input and always succeed. The forms are only
passed through so a presentation layer can hand them over unchanged.
"""

from typing import Optional

from .forms import LoginForm, SignupForm
from .machine import SessionNavigator
from .models import NavigationResult, Trigger


class AuthFlowController:
    """Issues the Login and Signup triggers on behalf of the auth screens."""

    def __init__(self, navigator: SessionNavigator):
        self.navigator = navigator

    def submit_login(self, form: Optional[LoginForm] = None) -> NavigationResult:
        return self.navigator.dispatch(Trigger.SUBMIT_LOGIN)

    def open_signup(self) -> NavigationResult:
        return self.navigator.dispatch(Trigger.OPEN_SIGNUP)

    def submit_signup(self, form: Optional[SignupForm] = None) -> NavigationResult:
        # Password and confirmation are deliberately not compared.
        return self.navigator.dispatch(Trigger.SUBMIT_SIGNUP)

    def back_to_login(self) -> NavigationResult:
        return self.navigator.dispatch(Trigger.BACK_TO_LOGIN)
