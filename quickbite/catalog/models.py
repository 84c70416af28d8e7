"""Immutable catalog entries."""

from dataclasses import dataclass
from decimal import Decimal

from ..utils.money import to_price


@dataclass(frozen=True)
class Restaurant:
    """A restaurant listed on the home screen."""

    id: int
    name: str
    address: str
    cuisine: str


@dataclass(frozen=True)
class MenuItem:
    """A purchasable dish. The id is the cart's de-duplication key."""

    id: int
    name: str
    description: str
    price: Decimal

    def __post_init__(self) -> None:
        # Accept float and str literals but always store an exact Decimal.
        object.__setattr__(self, "price", to_price(self.price))
