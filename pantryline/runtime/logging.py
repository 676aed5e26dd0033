"""Centralized logging configuration for pantryline.

Usage:
    from pantryline.runtime import get_logger
    logger = get_logger(__name__)

    logger.debug("Detailed debug info")
    logger.info("General info")
    logger.warning("Warning message")
    logger.error("Error message")

Pure packages (``pantryline.inventory``, ``pantryline.domain``) log through
``logging.getLogger(__name__)`` directly; their loggers already sit under the
``pantryline`` namespace configured here.

Environment variables:
    PANTRYLINE_LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR). Default: INFO
"""

import logging
import os
import sys

# Default log level, can be overridden by environment variable
DEFAULT_LOG_LEVEL = logging.INFO

LOG_NAMESPACE = "pantryline"

# Format for log messages
LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
LOG_FORMAT_DEBUG = "%(levelname)s [%(name)s:%(lineno)d] %(message)s"

# Track if logging has been configured
_logging_configured = False


def configure_logging(level: int | None = None) -> None:
    """Configure the pantryline namespace logger.

    Args:
        level: Log level to use. If None, reads from PANTRYLINE_LOG_LEVEL env var
               or uses DEFAULT_LOG_LEVEL.
    """
    global _logging_configured

    if _logging_configured:
        return

    # Determine log level
    if level is None:
        env_level = os.environ.get("PANTRYLINE_LOG_LEVEL", "").upper()
        level_map = {
            "DEBUG": logging.DEBUG,
            "INFO": logging.INFO,
            "WARNING": logging.WARNING,
            "WARN": logging.WARNING,
            "ERROR": logging.ERROR,
        }
        level = level_map.get(env_level, DEFAULT_LOG_LEVEL)

    # Choose format based on level
    log_format = LOG_FORMAT_DEBUG if level == logging.DEBUG else LOG_FORMAT

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(log_format))

    namespace_logger = logging.getLogger(LOG_NAMESPACE)
    namespace_logger.setLevel(level)
    namespace_logger.addHandler(handler)
    namespace_logger.propagate = False

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name.

    Args:
        name: Module name, typically __name__

    Returns:
        Configured logger instance
    """
    # Ensure logging is configured
    configure_logging()

    # Module names inside the package are already namespaced.
    if name == LOG_NAMESPACE or name.startswith(f"{LOG_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOG_NAMESPACE}.{name}")


def set_log_level(level: int) -> None:
    """Change the log level at runtime.

    Args:
        level: New log level (e.g., logging.DEBUG)
    """
    logger = logging.getLogger(LOG_NAMESPACE)
    logger.setLevel(level)

    # Update format if switching to/from DEBUG
    for handler in logger.handlers:
        if level == logging.DEBUG:
            handler.setFormatter(logging.Formatter(LOG_FORMAT_DEBUG))
        else:
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
