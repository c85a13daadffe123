"""Injection configuration using Pydantic v2 Settings.

Centralized configuration that loads from environment variables
(``PROTEUS_*``) and provides type-safe access to the engine.
"""

import logging
import re
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

VALID_STRATEGIES = ("functional", "safe-hash")

_ATTRIBUTE_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_:.-]*$")


class ConfigurationError(ValueError):
    """Raised when the configuration cannot drive an injection pass."""


class Settings(BaseSettings):
    """Injection settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="PROTEUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Strategy Selection
    strategy: str = Field(
        default="functional",
        description="Naming strategy to use: 'functional' or 'safe-hash'.",
    )

    # Reusable component detection
    detect_reusable_components: bool = Field(
        default=True,
        description="Skip thin ref-forwarding wrapper definitions in shared UI folders.",
    )
    auto_exclude_patterns: list[str] = Field(
        default_factory=list,
        description="Wildcard patterns; matching files are skipped wholesale.",
    )

    # Generated attribute
    attribute_name: str = Field(
        default="data-testid",
        description="Attribute injected into markup elements.",
    )
    descriptor_max_length: int = Field(
        default=40,
        ge=8,
        description="Maximum length of a descriptor folded into an identifier.",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR.",
    )
    log_dir: Path | None = Field(
        default=None,
        description="Directory for info.log / error.log. Console only when unset.",
    )

    @field_validator("strategy")
    @classmethod
    def normalize_strategy(cls, v: str) -> str:
        """Normalize strategy name to lowercase."""
        return v.strip().lower()

    @field_validator("attribute_name")
    @classmethod
    def check_attribute_name(cls, v: str) -> str:
        """Reject names that cannot appear as a JSX attribute."""
        if not _ATTRIBUTE_NAME.match(v):
            raise ValueError(f"Invalid attribute name: {v!r}")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper()

    def configure_logging(self) -> None:
        """Configure global logging based on settings."""
        import structlog

        level = getattr(logging, self.log_level, logging.INFO)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

        logging.getLogger("proteus").setLevel(level)
        logger.setLevel(level)


def validate_settings(settings: Settings) -> Settings:
    """Fail fast on settings the engine cannot honour.

    Args:
        settings: The settings to check.

    Returns:
        The same settings, for chaining.

    Raises:
        ConfigurationError: If the strategy name is not recognised.
    """
    if settings.strategy not in VALID_STRATEGIES:
        raise ConfigurationError(
            f"Invalid strategy: {settings.strategy}. "
            f"Valid options: {', '.join(repr(s) for s in VALID_STRATEGIES)}"
        )

    logger.debug(
        f"Config validated: strategy={settings.strategy}, "
        f"detect_reusable_components={settings.detect_reusable_components}, "
        f"auto_exclude_patterns={len(settings.auto_exclude_patterns)}"
    )
    return settings


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global Settings instance.

    Returns:
        The singleton Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        _settings.configure_logging()
    return _settings
