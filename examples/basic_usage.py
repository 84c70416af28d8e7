#!/usr/bin/env python3
"""
Basic Usage Example - QuickBite Order Session

This script walks one session through the full happy path:
- Splash timeout into Login
- Login into Home, pick a restaurant, fill the cart
- Checkout with a card and return to a fresh Home

Run: python examples/basic_usage.py
"""

from quickbite import start_session
from quickbite.state import CardPaymentDetails, LoginForm, SessionState, Trigger
from quickbite.utils.money import format_price


def print_screen(state: SessionState) -> None:
    history = " > ".join(str(screen) for screen in state.history) or "(empty)"
    print(f"  📱 {state.current}   history: {history}")


def main():
    """Run the walkthrough."""
    print("🍕 QuickBite session walkthrough")
    print("=" * 50)

    # The splash timer is left unarmed; the timeout is dispatched by hand below.
    session = start_session(overrides={"session": {"start_splash_timer": False}})
    session.navigator.subscribe(print_screen)
    session.cart.subscribe(
        lambda lines: print(f"  🛒 {len(lines)} line(s), total {session.cart.formatted_total()}")
    )

    with session:
        print(f"\nSession {session.session_id} starts on {session.navigator.current}")

        session.navigator.dispatch(Trigger.SPLASH_TIMEOUT)
        session.auth.submit_login(LoginForm(email="demo@example.com", password="anything"))

        print("\n🔎 Restaurants matching 'pizza':")
        for restaurant in session.search_restaurants("pizza"):
            print(f"  • {restaurant.id}: {restaurant.name} ({restaurant.cuisine})")

        session.select_restaurant(1)
        session.add_menu_item(6, quantity=2)
        session.add_menu_item(6, quantity="1", customization="extra cheese")
        session.add_menu_item(22, quantity="lots")  # malformed, coerced to 1

        print("\n🧾 Cart:")
        for line in session.cart.cart_contents():
            note = f" [{line.customization}]" if line.customization else ""
            print(f"  {line.quantity} x {line.name}{note}  {format_price(line.line_total)}")
        print(f"  Total: {session.cart.formatted_total()}")

        print("\n💳 Checkout:")
        session.navigator.dispatch(Trigger.VIEW_CART)
        session.navigator.dispatch(Trigger.CHECKOUT)
        session.checkout.choose_card()
        session.checkout.confirm_card_payment(CardPaymentDetails())
        session.checkout.go_home()

        result = session.navigator.back()
        print(f"\n↩️  Back from fresh Home accepted: {result.accepted} ({result.reason})")


if __name__ == "__main__":
    main()
