"""Centralized logging configuration for the injector.

Provides a console handler and, when a log directory is configured,
separate files for:
- info.log: General logs (INFO level and above)
- error.log: Error logs only (ERROR level and above)
"""

import logging
import sys

from proteus.core.config import Settings, get_settings


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """Configure the ``proteus`` logger with console and file handlers.

    Console output goes to stderr so transformed source written to stdout
    by a caller is never interleaved with log lines.

    Args:
        settings: Settings to read the level and log directory from.
            If None, uses global settings.

    Returns:
        The configured package logger.
    """
    settings = settings or get_settings()
    level = logging.DEBUG if settings.log_level == "DEBUG" else logging.INFO

    # Create formatters
    detailed_formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    simple_formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    package_logger = logging.getLogger("proteus")
    package_logger.setLevel(level)

    # Clear existing handlers
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    if settings.log_dir is not None:
        log_dir = settings.log_dir
        log_dir.mkdir(parents=True, exist_ok=True)

        # File handler for INFO and above (info.log)
        info_handler = logging.FileHandler(log_dir / "info.log", encoding="utf-8")
        info_handler.setLevel(logging.INFO)
        info_handler.setFormatter(detailed_formatter)
        package_logger.addHandler(info_handler)

        # File handler for ERROR and above (error.log)
        error_handler = logging.FileHandler(log_dir / "error.log", encoding="utf-8")
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(detailed_formatter)
        package_logger.addHandler(error_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(simple_formatter)
    package_logger.addHandler(console_handler)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name.

    Args:
        name: The name for the logger (typically __name__ of the module).

    Returns:
        A configured logger instance.
    """
    return logging.getLogger(name)
