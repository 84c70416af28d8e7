"""
Quantity input handling.

User-entered quantities are coerced, never rejected: anything that is not a
positive whole number falls back to the default quantity.
"""

import math
from decimal import Decimal
from typing import Any

from ..errors import MalformedQuantityError
from ..logging.config import get_cart_logger

cart_logger = get_cart_logger(__name__)

DEFAULT_QUANTITY = 1
MAX_LOGGED_CHARS = 64


def parse_quantity(raw: Any) -> int:
    """
    Strictly parse a quantity entry.

    Accepts ints, whole-valued floats and strings of decimal digits
    (surrounding whitespace allowed). Booleans, fractions, negative signs
    and anything below 1 are malformed.

    Raises:
        MalformedQuantityError: if the value is not a positive whole number
    """
    if isinstance(raw, bool):
        raise MalformedQuantityError("Quantity must be a number", raw_value=raw)

    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, (float, Decimal)):
        finite = raw.is_finite() if isinstance(raw, Decimal) else math.isfinite(raw)
        if not finite or raw != int(raw):
            raise MalformedQuantityError("Quantity must be a whole number", raw_value=raw)
        value = int(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if text.startswith("+"):
            text = text[1:]
        if not text.isdecimal():
            raise MalformedQuantityError("Quantity must be numeric", raw_value=raw)
        try:
            value = int(text)
        except ValueError as e:
            # Digit strings past the interpreter's conversion limit
            raise MalformedQuantityError("Quantity is too long", raw_value=raw) from e
    else:
        raise MalformedQuantityError(
            f"Unsupported quantity type: {type(raw).__name__}",
            raw_value=raw
        )

    if value < 1:
        raise MalformedQuantityError("Quantity must be at least 1", raw_value=raw)

    return value


def _describe(raw: Any) -> str:
    """Short printable form of a raw entry for log output."""
    try:
        text = repr(raw)
    except ValueError:
        # int.__repr__ refuses values past the digit conversion limit
        return f"<{type(raw).__name__}>"
    if len(text) > MAX_LOGGED_CHARS:
        return text[:MAX_LOGGED_CHARS] + "..."
    return text


def coerce_quantity(raw: Any, default: int = DEFAULT_QUANTITY) -> int:
    """Parse a quantity entry, falling back to the default when malformed."""
    try:
        return parse_quantity(raw)
    except MalformedQuantityError as e:
        cart_logger.warning(
            "Coerced malformed quantity",
            raw_value=_describe(raw),
            reason=str(e),
            fallback=default
        )
        return default
