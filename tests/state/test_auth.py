"""Tests for the authentication placeholders."""

from quickbite.state.auth import AuthFlowController
from quickbite.state.forms import LoginForm, ProfileForm, SignupForm
from quickbite.state.models import Screen, ScreenId, Trigger


class TestAuthFlowController:
    """Test login and signup always succeed."""

    def test_login_with_empty_credentials(self, navigator):
        navigator.dispatch(Trigger.SPLASH_TIMEOUT)
        auth = AuthFlowController(navigator)

        assert auth.submit_login(LoginForm()).accepted
        assert navigator.current == ScreenId(Screen.HOME)

    def test_signup_with_mismatched_passwords(self, navigator):
        """Test no credential check is performed."""
        navigator.dispatch(Trigger.SPLASH_TIMEOUT)
        auth = AuthFlowController(navigator)

        auth.open_signup()
        result = auth.submit_signup(SignupForm("a@b.c", "one", "two"))

        assert result.accepted
        assert navigator.current == ScreenId(Screen.HOME)

    def test_back_to_login(self, navigator):
        navigator.dispatch(Trigger.SPLASH_TIMEOUT)
        auth = AuthFlowController(navigator)
        auth.open_signup()

        assert auth.back_to_login().accepted
        assert navigator.current == ScreenId(Screen.LOGIN)

    def test_login_during_splash_rejected(self, navigator):
        auth = AuthFlowController(navigator)

        assert not auth.submit_login().accepted
        assert navigator.current == ScreenId(Screen.SPLASH)


class TestProfileForm:
    """Test profile form defaults and edits."""

    def test_defaults(self):
        profile = ProfileForm()

        assert profile.name == "John Doe"
        assert profile.address == "123 Main St"

    def test_update_returns_copy(self):
        profile = ProfileForm()

        edited = profile.update(address="9 New Rd")

        assert edited.address == "9 New Rd"
        assert edited.name == "John Doe"
        assert profile.address == "123 Main St"
