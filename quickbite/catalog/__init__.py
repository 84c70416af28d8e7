"""
Catalog module.

Restaurant and menu item data consumed by the session controller. The catalog
is a pure data source; nothing in the core mutates it.
"""
from .models import MenuItem, Restaurant
from .provider import CatalogProvider, StaticCatalogProvider

__all__ = ["CatalogProvider", "MenuItem", "Restaurant", "StaticCatalogProvider"]
