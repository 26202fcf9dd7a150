"""
Configuration management for the iris matcher.

This module loads runtime settings from environment variables and an optional
``.env`` file, and configures structured logging. Only ambient concerns are
configurable here; the matching parameters live in ``constants``.
"""

import logging
import os
import sys
from typing import Optional

import structlog
from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Load environment variables from .env file if it exists
load_dotenv()

# =============================================================================
# Logging Configuration
# =============================================================================
# Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()

# Render log events as JSON lines instead of the console format
STRUCTURED_LOGGING: bool = os.getenv("STRUCTURED_LOGGING", "false").lower() == "true"

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# =============================================================================
# Development and Debugging Configuration
# =============================================================================
# Enable debug mode (skips configuration validation at startup)
DEBUG_MODE: bool = os.getenv("DEBUG_MODE", "false").lower() == "true"


def configure_logging(
    level: Optional[str] = None, structured: Optional[bool] = None
) -> None:
    """
    Configure structlog for the current process.

    Log events are written to stderr so that interactive prompts on stdout
    are not interleaved with log output.

    Parameters
    ----------
    level : str, optional
        Log level name. Defaults to ``LOG_LEVEL``.
    structured : bool, optional
        Whether to render JSON lines. Defaults to ``STRUCTURED_LOGGING``.

    Raises
    ------
    ConfigurationError
        If the level name is not recognized.
    """
    level_name = (level or LOG_LEVEL).upper()
    if level_name not in VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"LOG_LEVEL must be one of {VALID_LOG_LEVELS}",
            config_key="LOG_LEVEL",
            config_value=level_name,
        )

    if structured is None:
        structured = STRUCTURED_LOGGING

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if structured:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level_name)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


# =============================================================================
# Configuration Validation
# =============================================================================
def validate_configuration() -> bool:
    """
    Validate the current configuration settings.

    Returns
    -------
    bool
        True if configuration is valid.

    Raises
    ------
    ConfigurationError
        If a configuration parameter is invalid.
    """
    errors = []

    if LOG_LEVEL not in VALID_LOG_LEVELS:
        errors.append(f"LOG_LEVEL must be one of {VALID_LOG_LEVELS}")

    if errors:
        raise ConfigurationError(
            "Configuration validation failed:\n"
            + "\n".join(f"- {error}" for error in errors),
            config_key="LOG_LEVEL",
            config_value=LOG_LEVEL,
        )

    return True


def get_config_summary() -> dict:
    """
    Get a summary of the current configuration.

    Returns
    -------
    dict
        Dictionary containing key configuration parameters.
    """
    return {
        "logging": {
            "level": LOG_LEVEL,
            "structured": STRUCTURED_LOGGING,
        },
        "debug_mode": DEBUG_MODE,
    }

