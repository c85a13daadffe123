"""Proteus: stable test-identifier injection for JSX/TSX sources."""

from proteus.core.config import ConfigurationError, Settings
from proteus.core.logging_config import setup_logging
from proteus.engine import InjectionEngine, inject_source
from proteus.models import ElementContext, ErrorRecord, GeneratedAttribute, TransformResult

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Settings",
    "setup_logging",
    "InjectionEngine",
    "inject_source",
    "ElementContext",
    "ErrorRecord",
    "GeneratedAttribute",
    "TransformResult",
]
