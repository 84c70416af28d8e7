"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from .defaults import CartParams, LoggingParams, SessionParams

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def _unknown_keys(section: str, params: dict[str, Any], known: type) -> list[ValidationError]:
        allowed = set(known.__dataclass_fields__)
        return [
            ValidationError(field=f"{section}.{key}", message="Unknown parameter", value=params[key])
            for key in params
            if key not in allowed
        ]

    @staticmethod
    def validate_session_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate session parameters."""
        errors = ConfigValidator._unknown_keys("session", params, SessionParams)

        if "splash_delay_seconds" in params:
            value = params["splash_delay_seconds"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="splash_delay_seconds",
                    message="Must be a non-negative number",
                    value=value
                ))

        if "start_splash_timer" in params:
            value = params["start_splash_timer"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="start_splash_timer",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_cart_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate cart parameters."""
        errors = ConfigValidator._unknown_keys("cart", params, CartParams)

        if "default_quantity" in params:
            value = params["default_quantity"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                errors.append(ValidationError(
                    field="default_quantity",
                    message="Must be a positive integer",
                    value=value
                ))

        if "currency" in params:
            value = params["currency"]
            if not isinstance(value, str) or len(value) != 3 or not value.isalpha():
                errors.append(ValidationError(
                    field="currency",
                    message="Must be a three-letter currency code",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = ConfigValidator._unknown_keys("logging", params, LoggingParams)

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {sorted(VALID_LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section, params in config.items():
            if section not in ("session", "cart", "logging"):
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=params
                ))
            elif not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))

        if isinstance(config.get("session"), dict):
            errors.extend(ConfigValidator.validate_session_params(config["session"]))

        if isinstance(config.get("cart"), dict):
            errors.extend(ConfigValidator.validate_cart_params(config["cart"]))

        if isinstance(config.get("logging"), dict):
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
