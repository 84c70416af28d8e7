"""
Transition table and pure resolution functions for screen navigation.

Resolution never mutates anything: it takes a SessionState and returns the
next one, or raises a NavigationError. The navigator owns the state and
turns those errors into rejected results.
"""

from typing import Optional, Union

from ..errors import EmptyHistoryError, InvalidTriggerError, MissingPayloadError
from .models import Screen, ScreenId, SessionState, TransitionRule, Trigger

TRANSITION_RULES: tuple[TransitionRule, ...] = (
    # Authentication gate: each step removes itself from history
    TransitionRule(Screen.SPLASH, Trigger.SPLASH_TIMEOUT, Screen.LOGIN, pop_up_to=Screen.SPLASH),
    TransitionRule(Screen.LOGIN, Trigger.SUBMIT_LOGIN, Screen.HOME, pop_up_to=Screen.LOGIN),
    TransitionRule(Screen.LOGIN, Trigger.OPEN_SIGNUP, Screen.SIGNUP, pop_up_to=Screen.LOGIN),
    TransitionRule(Screen.SIGNUP, Trigger.SUBMIT_SIGNUP, Screen.HOME, pop_up_to=Screen.SIGNUP),
    TransitionRule(Screen.SIGNUP, Trigger.BACK_TO_LOGIN, Screen.LOGIN, pop_up_to=Screen.SIGNUP),

    # Browsing
    TransitionRule(Screen.HOME, Trigger.SELECT_RESTAURANT, Screen.MENU),
    TransitionRule(Screen.HOME, Trigger.OPEN_CART, Screen.CART),
    TransitionRule(Screen.HOME, Trigger.OPEN_PROFILE, Screen.PROFILE),
    TransitionRule(Screen.HOME, Trigger.OPEN_ORDER_HISTORY, Screen.ORDER_HISTORY),
    TransitionRule(Screen.MENU, Trigger.VIEW_CART, Screen.CART),
    TransitionRule(Screen.CART, Trigger.CHECKOUT, Screen.CHECKOUT),

    # Checkout
    TransitionRule(Screen.CHECKOUT, Trigger.CHOOSE_CASH, Screen.CASH_PAYMENT),
    TransitionRule(Screen.CHECKOUT, Trigger.CHOOSE_CARD, Screen.CARD_PAYMENT),
    TransitionRule(Screen.CASH_PAYMENT, Trigger.CONFIRM_PAYMENT, Screen.SUCCESS),
    TransitionRule(Screen.CARD_PAYMENT, Trigger.CONFIRM_PAYMENT, Screen.SUCCESS),
    TransitionRule(Screen.SUCCESS, Trigger.GO_HOME, Screen.HOME, pop_up_to=Screen.HOME),
)

TRANSITION_TABLE: dict[tuple[Screen, Trigger], TransitionRule] = {
    (rule.source, rule.trigger): rule for rule in TRANSITION_RULES
}


def allowed_triggers(screen: Screen) -> list[Trigger]:
    """Triggers listed for a screen, in table order."""
    return [rule.trigger for rule in TRANSITION_RULES if rule.source == screen]


def find_rule(screen: Screen, trigger: Trigger) -> Optional[TransitionRule]:
    return TRANSITION_TABLE.get((screen, trigger))


def coerce_trigger(trigger: Union[Trigger, str]) -> Trigger:
    """Accept a Trigger or its string value."""
    if isinstance(trigger, Trigger):
        return trigger
    try:
        return Trigger(trigger)
    except ValueError as e:
        raise InvalidTriggerError(
            f"Unknown trigger {trigger!r}",
            trigger=str(trigger)
        ) from e


def pop_up_to(
    stack: tuple[ScreenId, ...],
    screen: Screen
) -> tuple[tuple[ScreenId, ...], tuple[ScreenId, ...]]:
    """
    Pop entries off the top of the stack until a screen of the given kind
    has been popped (inclusive).

    If no entry of that kind is on the stack nothing is popped.

    Returns:
        (remaining stack, popped entries bottom to top)
    """
    for index in range(len(stack) - 1, -1, -1):
        if stack[index].screen == screen:
            return stack[:index], stack[index:]
    return stack, ()


def resolve_transition(
    state: SessionState,
    trigger: Union[Trigger, str],
    restaurant_id: Optional[int] = None
) -> tuple[SessionState, tuple[ScreenId, ...]]:
    """
    Compute the state that follows a trigger.

    Args:
        state: Current session state
        trigger: Requested trigger
        restaurant_id: Payload for SELECT_RESTAURANT

    Returns:
        (next state, entries evicted from the back stack)

    Raises:
        InvalidTriggerError: trigger not listed for the current screen
        MissingPayloadError: SELECT_RESTAURANT without an integer restaurant id
    """
    current = state.current
    trig = coerce_trigger(trigger)

    rule = find_rule(current.screen, trig)
    if rule is None:
        raise InvalidTriggerError(
            f"Trigger {trig.value} is not allowed from {current}",
            trigger=trig.value,
            current_screen=str(current),
            context={"allowed": [t.value for t in allowed_triggers(current.screen)]}
        )

    if rule.target == Screen.MENU:
        if not isinstance(restaurant_id, int) or isinstance(restaurant_id, bool):
            raise MissingPayloadError(
                f"Trigger {trig.value} requires an integer restaurant_id",
                trigger=trig.value,
                payload_field="restaurant_id",
                current_screen=str(current)
            )
        target = ScreenId.menu(restaurant_id)
    else:
        target = ScreenId(rule.target)

    stack = state.back_stack
    evicted: tuple[ScreenId, ...] = ()
    if rule.pop_up_to is not None:
        stack, evicted = pop_up_to(stack, rule.pop_up_to)

    return SessionState.from_stack(stack + (target,)), evicted


def resolve_back(state: SessionState) -> SessionState:
    """
    Pop the current screen and restore the previous one unchanged.

    Raises:
        EmptyHistoryError: there is no prior screen
    """
    if not state.can_go_back:
        raise EmptyHistoryError(
            f"No screen to return to from {state.current}",
            current_screen=str(state.current)
        )
    return SessionState.from_stack(state.history)
