"""
Cart store for a single order session.

Owns the cart lines and all add/remove/quantity rules. No operation can fail
in the business sense: malformed quantities are coerced, and removing a line
that is not in the cart is a no-op.
"""

from decimal import Decimal
from typing import Any, Callable, Optional, Union

import structlog

from ..catalog.models import MenuItem
from ..logging.config import get_cart_logger, log_cart_change
from ..utils.money import ZERO, format_price
from ..utils.observable import Observable
from .models import CartLine
from .quantity import DEFAULT_QUANTITY, coerce_quantity

logger = structlog.get_logger(__name__)
cart_logger = get_cart_logger(__name__)

CartSnapshot = tuple[CartLine, ...]


class CartStore:
    """Ordered collection of cart lines keyed by menu item id."""

    def __init__(self, default_quantity: int = DEFAULT_QUANTITY, currency: str = "USD"):
        self.logger = logger
        self.cart_logger = cart_logger
        self.default_quantity = default_quantity
        self.currency = currency
        self._lines: dict[int, CartLine] = {}
        self._changes: Observable[CartSnapshot] = Observable("cart")

    def add_to_cart(self, item: MenuItem, quantity: Any = 1, customization: str = "") -> CartLine:
        """
        Add a menu item to the cart.

        If a line for the item already exists its quantity is increased and
        its customization replaced; otherwise a new line is appended.

        Args:
            item: Catalog entry being added
            quantity: Requested quantity; malformed values fall back to the default
            customization: Free-form note, may be empty

        Returns:
            The line as stored after the add
        """
        qty = coerce_quantity(quantity, default=self.default_quantity)
        customization = customization or ""

        existing = self._lines.get(item.id)
        if existing is not None:
            line = existing.with_added(qty, customization)
            action = "merged"
        else:
            line = CartLine.from_menu_item(item, qty, customization)
            action = "added"

        # Replacing the value keeps the line's original position.
        self._lines[item.id] = line

        log_cart_change(
            self.cart_logger,
            action=action,
            line_id=line.id,
            quantity=line.quantity,
            cart_total=self.cart_total(),
            context={"added_quantity": qty, "customization": customization}
        )
        self._publish()
        return line

    def remove_from_cart(self, line: Union[int, CartLine]) -> bool:
        """
        Remove a line by id (or by the line itself).

        Returns:
            True if a line was removed, False if none matched
        """
        line_id = line.id if isinstance(line, CartLine) else line

        removed = self._lines.pop(line_id, None)
        if removed is None:
            self.logger.debug("Ignored removal of absent cart line", line_id=line_id)
            return False

        log_cart_change(
            self.cart_logger,
            action="removed",
            line_id=removed.id,
            quantity=0,
            cart_total=self.cart_total()
        )
        self._publish()
        return True

    def clear(self) -> None:
        """Remove every line."""
        if not self._lines:
            return

        removed_ids = list(self._lines)
        self._lines.clear()

        self.cart_logger.info("Cart cleared", removed_line_ids=removed_ids)
        self._publish()

    def cart_contents(self) -> CartSnapshot:
        """Snapshot of the cart lines in insertion order."""
        return tuple(self._lines.values())

    def cart_total(self) -> Decimal:
        """Sum of price * quantity over all lines, computed on every call."""
        return sum((line.line_total for line in self._lines.values()), ZERO)

    def formatted_total(self) -> str:
        """Cart total rendered in the cart currency, e.g. "$29.97"."""
        return format_price(self.cart_total(), self.currency)

    def get_line(self, line_id: int) -> Optional[CartLine]:
        return self._lines.get(line_id)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def item_count(self) -> int:
        """Total number of units across all lines."""
        return sum(line.quantity for line in self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def subscribe(self, callback: Callable[[CartSnapshot], None]) -> Callable[[], None]:
        """Be notified with a fresh snapshot after every committed change."""
        return self._changes.subscribe(callback)

    def close(self) -> None:
        """Drop all subscribers."""
        self._changes.clear()

    def _publish(self) -> None:
        self._changes.publish(self.cart_contents())

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, line_id: object) -> bool:
        return line_id in self._lines
