"""
Form values collected by the placeholder screens.

None of these are validated: login and signup always succeed, payment details
are never checked, and profile edits are kept in memory only.
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class LoginForm:
    email: str = ""
    password: str = ""


@dataclass(frozen=True)
class SignupForm:
    email: str = ""
    password: str = ""
    confirm_password: str = ""


@dataclass(frozen=True)
class CardPaymentDetails:
    card_number: str = ""
    expiry_date: str = ""
    cvv: str = ""


@dataclass(frozen=True)
class ProfileForm:
    """Editable profile shown on the profile screen."""

    name: str = "John Doe"
    address: str = "123 Main St"
    picture_url: str = "https://example.com/profile.jpg"

    def update(self, name: Optional[str] = None, address: Optional[str] = None) -> "ProfileForm":
        """Return a copy with the given fields changed."""
        changes = {}
        if name is not None:
            changes["name"] = name
        if address is not None:
            changes["address"] = address
        return replace(self, **changes)
