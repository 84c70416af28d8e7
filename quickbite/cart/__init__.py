"""
Cart store module.

Aggregates menu items into cart lines keyed by menu item id and derives the
cart total on every read.
"""
from .models import CartLine
from .quantity import coerce_quantity, parse_quantity
from .store import CartStore

__all__ = ["CartLine", "CartStore", "coerce_quantity", "parse_quantity"]
