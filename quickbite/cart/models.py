"""
Cart data models.

Cart lines are immutable; the store replaces a line with an updated copy when
the same menu item is added again, keeping its position in the cart.
"""

from dataclasses import dataclass, replace
from decimal import Decimal

from ..catalog.models import MenuItem


@dataclass(frozen=True)
class CartLine:
    """One aggregated cart row for a menu item."""

    id: int                                          # Originating MenuItem id
    name: str
    description: str
    price: Decimal                                   # Copied at add time, never re-synced
    quantity: int = 1
    customization: str = ""

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError(f"Cart line quantity must be at least 1, got {self.quantity}")
        if self.price < 0:
            raise ValueError(f"Cart line price must be non-negative, got {self.price}")

    @classmethod
    def from_menu_item(cls, item: MenuItem, quantity: int, customization: str) -> "CartLine":
        """Create a new line from a catalog entry."""
        return cls(
            id=item.id,
            name=item.name,
            description=item.description,
            price=item.price,
            quantity=quantity,
            customization=customization,
        )

    def with_added(self, quantity: int, customization: str) -> "CartLine":
        """Increase the quantity and replace the customization (last write wins)."""
        return replace(self, quantity=self.quantity + quantity, customization=customization)

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity
