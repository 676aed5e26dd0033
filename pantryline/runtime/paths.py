"""Centralized path management for pantryline.

This module provides a single source of truth for configuration and data
paths, so modules do not compute them relative to the working directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _get_project_root() -> Path:
    """Determine the project root directory."""
    env_root = os.environ.get("PANTRYLINE_ROOT", "").strip()
    if env_root:
        return Path(env_root).expanduser()
    # pantryline/runtime/paths.py -> pantryline/runtime -> pantryline -> project root
    return Path(__file__).parent.parent.parent


@dataclass
class ProjectPaths:
    """Container for all project-related paths.

    All paths are computed relative to the project root, ensuring consistency
    across all modules regardless of the current working directory.
    """

    root: Path = field(default_factory=_get_project_root)

    def __post_init__(self) -> None:
        # Ensure root is resolved to absolute path
        self.root = self.root.resolve()

    # --- Configuration paths ---
    @property
    def config(self) -> Path:
        """Configuration directory (config/)."""
        return self.root / "config"

    @property
    def inventory_vocabulary(self) -> Path:
        """Project-level inventory vocabulary TOML file."""
        return self.config / "inventory_vocabulary.toml"


# Module-level singleton
_paths: ProjectPaths | None = None


def get_paths() -> ProjectPaths:
    """Get the singleton ProjectPaths instance.

    Returns:
        The global ProjectPaths instance.
    """
    global _paths
    if _paths is None:
        _paths = ProjectPaths()
    return _paths


def reset_paths() -> None:
    """Drop the cached ProjectPaths so the next get_paths() re-reads the environment."""
    global _paths
    _paths = None
