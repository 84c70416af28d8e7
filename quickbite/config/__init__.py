"""
Configuration module.

Frozen defaults, YAML overrides and validation for session parameters.
"""
from .defaults import DefaultConfig, get_default_config
from .loader import ConfigLoader, load_session_config

__all__ = ["ConfigLoader", "DefaultConfig", "get_default_config", "load_session_config"]
