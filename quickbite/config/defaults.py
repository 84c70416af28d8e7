"""Default configuration parameters for the order session controller."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionParams:
    """Session lifecycle parameters."""
    splash_delay_seconds: float = 2.0                # Splash screen hold before Login
    start_splash_timer: bool = True                  # Arm the splash timeout on startup


@dataclass(frozen=True)
class CartParams:
    """Cart store parameters."""
    default_quantity: int = 1                        # Fallback for malformed quantity input
    currency: str = "USD"


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete session configuration."""
    session: SessionParams
    cart: CartParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        session=SessionParams(),
        cart=CartParams(),
        logging=LoggingParams(),
    )


def config_from_dict(data: dict) -> DefaultConfig:
    """Build a configuration from a merged dictionary of sections."""
    return DefaultConfig(
        session=SessionParams(**data.get("session", {})),
        cart=CartParams(**data.get("cart", {})),
        logging=LoggingParams(**data.get("logging", {})),
    )
