"""Core configuration and factory components."""

from proteus.core.config import ConfigurationError, Settings, get_settings, validate_settings
from proteus.core.factory import ComponentFactory
from proteus.core.logging_config import get_logger, setup_logging

__all__ = [
    "ConfigurationError",
    "Settings",
    "get_settings",
    "validate_settings",
    "ComponentFactory",
    "get_logger",
    "setup_logging",
]
