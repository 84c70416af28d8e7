"""
Catalog provider interface and the built-in static catalog.

Every known restaurant serves the same menu. Restaurant ids are opaque keys:
an id with no catalog entry yields an empty menu rather than an error.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Optional

from .models import MenuItem, Restaurant


class CatalogProvider(ABC):
    """Source of restaurants and their menus."""

    @abstractmethod
    def list_restaurants(self) -> Sequence[Restaurant]:
        """Return every restaurant in display order."""
        pass

    @abstractmethod
    def list_menu_items(self, restaurant_id: int) -> Sequence[MenuItem]:
        """Return the menu for a restaurant, or an empty sequence if unknown."""
        pass

    def search_restaurants(self, query: str) -> list[Restaurant]:
        """Filter restaurants whose name or cuisine contains the query, case-insensitively."""
        needle = query.strip().lower()
        if not needle:
            return list(self.list_restaurants())
        return [
            restaurant for restaurant in self.list_restaurants()
            if needle in restaurant.name.lower() or needle in restaurant.cuisine.lower()
        ]

    def find_menu_item(self, restaurant_id: int, item_id: int) -> Optional[MenuItem]:
        """Look up a single menu item of a restaurant."""
        for item in self.list_menu_items(restaurant_id):
            if item.id == item_id:
                return item
        return None


RESTAURANTS: tuple[Restaurant, ...] = (
    Restaurant(1, "Pizza Place", "123 Main St", "Pizza"),
    Restaurant(2, "Burger Joint", "456 Elm St", "Burgers"),
    Restaurant(3, "Sushi Spot", "789 Oak St", "Sushi"),
    Restaurant(4, "Taco Haven", "101 Pine St", "Mexican"),
    Restaurant(5, "Steakhouse Elite", "202 Maple St", "Steakhouse"),
)

MENU_ITEMS: tuple[MenuItem, ...] = (
    # Classic Burgers
    MenuItem(1, "Classic Cheeseburger", "Juicy beef patty, melted cheddar cheese, lettuce, tomato, pickles, and special sauce.", "7.99"),
    MenuItem(2, "Bacon BBQ Burger", "Beef patty with crispy bacon, BBQ sauce, cheddar cheese, lettuce, and onion rings.", "9.49"),
    MenuItem(3, "Mushroom Swiss Burger", "Beef patty topped with sautéed mushrooms, Swiss cheese, and garlic aioli.", "8.99"),

    # Gourmet Burgers
    MenuItem(4, "Truffle Burger", "Beef patty with truffle aioli, sautéed mushrooms, Swiss cheese, and arugula.", "12.99"),
    MenuItem(5, "Lobster Roll", "Fresh lobster meat mixed with lemon herb mayo, served on a toasted bun with lettuce.", "15.99"),

    # Pizzas
    MenuItem(6, "Margherita Pizza", "Classic pizza with tomato sauce, fresh mozzarella, basil leaves, and a drizzle of olive oil.", "9.99"),
    MenuItem(7, "Pepperoni Pizza", "Pepperoni slices, mozzarella cheese, and tomato sauce on a hand-tossed crust.", "10.49"),
    MenuItem(8, "Vegetarian Supreme Pizza", "Loaded with bell peppers, mushrooms, olives, onions, and spinach on a tomato base.", "11.49"),
    MenuItem(9, "Prosciutto and Arugula Pizza", "Thinly sliced prosciutto, fresh arugula, shaved Parmesan, and a balsamic glaze.", "12.99"),

    # Pastas
    MenuItem(10, "Spaghetti Carbonara", "Classic Italian pasta with pancetta, eggs, Parmesan cheese, and black pepper.", "11.99"),
    MenuItem(11, "Fettuccine Alfredo", "Fettuccine pasta in a rich and creamy Alfredo sauce made with butter, cream, and Parmesan.", "12.49"),
    MenuItem(12, "Penne Arrabbiata", "Penne pasta tossed in a spicy tomato sauce with garlic, red chili flakes, and parsley.", "10.99"),
    MenuItem(13, "Lasagna Bolognese", "Layers of pasta with rich Bolognese meat sauce, béchamel sauce, and melted mozzarella.", "13.49"),

    # Appetizers
    MenuItem(14, "Truffle Fries", "Crispy fries tossed with truffle oil, Parmesan cheese, and fresh herbs.", "6.99"),
    MenuItem(15, "Chicken Wings", "Spicy buffalo wings served with celery sticks and ranch dipping sauce.", "8.49"),
    MenuItem(16, "Caprese Salad", "Fresh mozzarella, tomatoes, and basil drizzled with balsamic reduction and olive oil.", "7.99"),

    # Desserts
    MenuItem(17, "Chocolate Lava Cake", "Warm chocolate cake with a gooey molten center, served with vanilla ice cream.", "6.99"),
    MenuItem(18, "Tiramisu", "Classic Italian dessert with coffee-soaked ladyfingers, mascarpone cheese, and cocoa powder.", "7.49"),
    MenuItem(19, "New York Cheesecake", "Rich and creamy cheesecake with a graham cracker crust and a hint of vanilla.", "6.49"),

    # Beverages
    MenuItem(20, "Craft Beer", "Locally brewed craft beer with a rich and diverse flavor profile.", "5.99"),
    MenuItem(21, "Fresh Lemonade", "Refreshing lemonade made with freshly squeezed lemons and a touch of mint.", "4.99"),
    MenuItem(22, "Cold Brew Coffee", "Smooth and strong cold brew coffee served over ice.", "3.99"),
)


class StaticCatalogProvider(CatalogProvider):
    """In-memory catalog; by default the built-in restaurants and shared menu."""

    def __init__(
        self,
        restaurants: Sequence[Restaurant] = RESTAURANTS,
        menu_items: Sequence[MenuItem] = MENU_ITEMS
    ):
        self._restaurants = tuple(restaurants)
        self._menu_items = tuple(menu_items)
        self._restaurant_ids = frozenset(r.id for r in self._restaurants)

    def list_restaurants(self) -> Sequence[Restaurant]:
        return self._restaurants

    def list_menu_items(self, restaurant_id: int) -> Sequence[MenuItem]:
        if restaurant_id not in self._restaurant_ids:
            return ()
        return self._menu_items
