"""Runtime infrastructure for pantryline.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Path resolution via get_paths(), ProjectPaths
- Vocabulary loading via load_inventory_vocabulary()

Usage:
    from pantryline.runtime import get_logger, get_paths

    logger = get_logger(__name__)
    paths = get_paths()
    print(paths.root, paths.inventory_vocabulary)
"""

from pantryline.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)
from pantryline.runtime.paths import ProjectPaths, get_paths, reset_paths
from pantryline.runtime.vocabulary_rules import load_inventory_vocabulary

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Vocabulary
    "load_inventory_vocabulary",
    # Paths
    "get_paths",
    "reset_paths",
    "ProjectPaths",
]
