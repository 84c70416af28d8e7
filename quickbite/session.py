"""
Order session coordinator.

Builds one independent cart store and one navigator per session and wires the
splash timeout to the navigator's lifetime. The two components never read
each other: checkout is reachable with an empty cart.
"""

from pathlib import Path
from typing import Any, Optional

import structlog

from .cart.models import CartLine
from .cart.store import CartStore
from .catalog.models import MenuItem, Restaurant
from .catalog.provider import CatalogProvider, StaticCatalogProvider
from .config.defaults import DefaultConfig
from .config.loader import load_session_config
from .logging.config import configure_logging
from .state.auth import AuthFlowController
from .state.checkout import CheckoutFlowController
from .state.forms import ProfileForm
from .state.machine import SessionNavigator
from .state.models import NavigationResult, Screen, SessionState, Trigger
from .state.splash import SplashTimeout, TimerFactory

logger = structlog.get_logger(__name__)


class OrderSession:
    """
    One continuous run of the app from Splash until close.

    Owns the cart store, the navigator and the splash timeout. Closing the
    session cancels a pending timeout so it can never fire afterwards.
    """

    def __init__(
        self,
        config: DefaultConfig,
        catalog: Optional[CatalogProvider] = None,
        timer_factory: Optional[TimerFactory] = None,
        session_id: Optional[str] = None
    ) -> None:
        self.logger = logger
        self.config = config
        self.catalog = catalog or StaticCatalogProvider()

        self.cart = CartStore(
            default_quantity=config.cart.default_quantity,
            currency=config.cart.currency
        )
        self.navigator = SessionNavigator(session_id=session_id)
        self.checkout = CheckoutFlowController(self.navigator)
        self.auth = AuthFlowController(self.navigator)
        self.profile = ProfileForm()

        self.splash_timeout = SplashTimeout(
            config.session.splash_delay_seconds,
            self._on_splash_timeout,
            timer_factory=timer_factory
        )
        self._unsubscribe_splash = self.navigator.subscribe(self._cancel_splash_on_exit)
        self._closed = False

        self.logger.info(
            "Order session created",
            session_id=self.session_id,
            splash_delay_seconds=config.session.splash_delay_seconds
        )

    @property
    def session_id(self) -> str:
        return self.navigator.session_id

    @property
    def state(self) -> SessionState:
        return self.navigator.state

    @property
    def closed(self) -> bool:
        return self._closed

    def start(self) -> None:
        """Arm the splash timeout if the session is still on Splash."""
        if self.navigator.current.screen == Screen.SPLASH:
            self.splash_timeout.start()

    def close(self) -> None:
        """Tear down the session; a pending splash timeout never fires."""
        if self._closed:
            return
        self._closed = True

        # Navigator first: a timeout already past the _closed check is rejected.
        self.navigator.close()
        self.splash_timeout.cancel()
        self._unsubscribe_splash()
        self.cart.close()

        self.logger.info(
            "Order session closed",
            session_id=self.session_id,
            final_screen=str(self.navigator.current),
            cart_lines=self.cart.line_count
        )

    # Browsing

    def search_restaurants(self, query: str = "") -> list[Restaurant]:
        return self.catalog.search_restaurants(query)

    def select_restaurant(self, restaurant_id: int) -> NavigationResult:
        return self.navigator.dispatch(Trigger.SELECT_RESTAURANT, restaurant_id=restaurant_id)

    def current_menu(self) -> list[MenuItem]:
        """Menu of the restaurant shown on the current Menu screen, else empty."""
        current = self.navigator.current
        if current.screen != Screen.MENU or current.restaurant_id is None:
            return []
        return list(self.catalog.list_menu_items(current.restaurant_id))

    def add_menu_item(self, item_id: int, quantity: Any = 1, customization: str = "") -> Optional[CartLine]:
        """
        Add an item from the current menu to the cart.

        Returns None when the session is not on a Menu screen or the item is
        not on that restaurant's menu.
        """
        current = self.navigator.current
        if current.screen != Screen.MENU or current.restaurant_id is None:
            self.logger.warning(
                "Ignored add outside of a menu screen",
                session_id=self.session_id,
                current_screen=str(current),
                item_id=item_id
            )
            return None

        item = self.catalog.find_menu_item(current.restaurant_id, item_id)
        if item is None:
            self.logger.warning(
                "Ignored add of unknown menu item",
                session_id=self.session_id,
                restaurant_id=current.restaurant_id,
                item_id=item_id
            )
            return None

        return self.cart.add_to_cart(item, quantity, customization)

    def save_profile(self, name: Optional[str] = None, address: Optional[str] = None) -> ProfileForm:
        """Keep edited profile values for the rest of the session."""
        self.profile = self.profile.update(name=name, address=address)
        return self.profile

    def _on_splash_timeout(self) -> None:
        if self._closed:
            return
        self.navigator.dispatch(Trigger.SPLASH_TIMEOUT)

    def _cancel_splash_on_exit(self, state: SessionState) -> None:
        if state.current.screen != Screen.SPLASH:
            self.splash_timeout.cancel()

    def __enter__(self) -> "OrderSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def start_session(
    config: Optional[DefaultConfig] = None,
    catalog: Optional[CatalogProvider] = None,
    config_dir: Optional[Path] = None,
    overrides: Optional[dict[str, Any]] = None,
    timer_factory: Optional[TimerFactory] = None,
    setup_logging: bool = False
) -> OrderSession:
    """
    Process entry: create a session on Splash and arm its timeout.

    Args:
        config: Ready configuration; loaded from defaults/file/overrides if omitted
        catalog: Catalog provider; the built-in static catalog if omitted
        config_dir: Directory holding session.yaml
        overrides: Highest-priority configuration values
        timer_factory: Replacement for threading.Timer (tests, UI event loops)
        setup_logging: Configure structlog from the logging section

    Raises:
        ConfigurationError: if the merged configuration is invalid
    """
    if config is None:
        config = load_session_config(config_dir, overrides)

    if setup_logging:
        configure_logging(level=config.logging.level, format_json=config.logging.format_json)

    session = OrderSession(config, catalog=catalog, timer_factory=timer_factory)
    if config.session.start_splash_timer:
        session.start()
    return session
