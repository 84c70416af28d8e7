"""
QuickBite - Order Session Controller

The non-visual core of a mobile food-ordering demo: a cart store that
aggregates menu items into lines, and a screen navigator that enforces the
legal screen-to-screen transitions of a browse, checkout and payment session.
"""

__version__ = "0.1.0"
__author__ = "QuickBite Team"

from .session import OrderSession, start_session

__all__ = ["OrderSession", "start_session"]
