"""
Centralized logging configuration for the QuickBite session controller.

This module provides standardized logging configuration using structlog
for all components. Cart mutations and screen transitions are logged through
the helpers below so every event carries the same field names.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_state_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for screen navigation events.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for navigation
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="navigation",
        audit_trail=True
    )


def get_cart_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for cart mutation events.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for the cart store
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="cart",
        audit_trail=True
    )


def log_state_transition(
    logger: FilteringBoundLogger,
    session_id: str,
    from_screen: str,
    to_screen: str,
    trigger: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a screen transition with standardized format.

    Args:
        logger: Structlog logger instance
        session_id: ID of the session transitioning
        from_screen: Screen before the transition
        to_screen: Screen after the transition
        trigger: What triggered the transition
        context: Additional context data (history depth, evicted screens)
    """
    bound_logger = logger.bind(
        session_id=session_id,
        from_screen=from_screen,
        to_screen=to_screen,
        trigger=trigger,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("State transition")


def log_cart_change(
    logger: FilteringBoundLogger,
    action: str,
    line_id: int,
    quantity: int,
    cart_total: Any,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a committed cart mutation with standardized format.

    Args:
        logger: Structlog logger instance
        action: Kind of mutation ("added", "merged", "removed", "cleared")
        line_id: Menu item id of the affected line
        quantity: Line quantity after the mutation (0 when removed)
        cart_total: Cart total after the mutation
        context: Additional context data
    """
    bound_logger = logger.bind(
        action=action,
        line_id=line_id,
        quantity=quantity,
        cart_total=str(cart_total),
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Cart changed")
