"""
Utility functions module.

Shared helpers used by both the cart store and the navigator: change
notification and money arithmetic.
"""
