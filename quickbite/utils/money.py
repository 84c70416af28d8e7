"""Decimal helpers for prices and totals."""

from decimal import Decimal, InvalidOperation
from typing import Union

ZERO = Decimal("0")
CENT = Decimal("0.01")

PriceLike = Union[Decimal, int, float, str]


def to_price(value: PriceLike) -> Decimal:
    """
    Convert a price to Decimal without binary float artifacts.

    Floats are converted through their shortest repr, so 9.99 becomes
    Decimal("9.99") rather than Decimal(9.99).
    """
    if isinstance(value, Decimal):
        price = value
    elif isinstance(value, float):
        price = Decimal(repr(value))
    else:
        try:
            price = Decimal(str(value))
        except InvalidOperation as e:
            raise ValueError(f"Invalid price: {value!r}") from e

    if not price.is_finite():
        raise ValueError(f"Invalid price: {value!r}")
    if price < ZERO:
        raise ValueError(f"Price must be non-negative: {value!r}")
    return price


def format_price(amount: Decimal, currency: str = "USD") -> str:
    """Render an amount for display, rounded to cents."""
    symbol = "$" if currency == "USD" else f"{currency} "
    return f"{symbol}{amount.quantize(CENT)}"
