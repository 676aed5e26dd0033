"""Runtime loader for inventory parsing vocabularies."""

from __future__ import annotations

import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from pantryline.inventory.vocabulary import InventoryVocabulary, build_inventory_vocabulary
from pantryline.runtime.logging import get_logger
from pantryline.runtime.paths import get_paths

logger = get_logger(__name__)


def _load_toml(path: Path) -> dict[str, Any]:
    """Load TOML file and return parsed dict; missing files map to empty dict."""
    if not path.exists():
        return {}

    with open(path, "rb") as f:
        data = tomllib.load(f)
    logger.debug("Loaded vocabulary config: %s", path)
    return data if isinstance(data, dict) else {}


@lru_cache(maxsize=8)
def load_inventory_vocabulary(vocabulary_paths: tuple[str, ...] | None = None) -> InventoryVocabulary:
    """Load vocabulary overrides from config files into an in-memory vocabulary.

    When ``vocabulary_paths`` is None, the project-level
    ``config/inventory_vocabulary.toml`` is used if present. Files are layered
    in order on top of the built-in vocabulary.
    """
    if vocabulary_paths is None:
        files = [get_paths().inventory_vocabulary]
    else:
        files = [Path(path) for path in vocabulary_paths]

    configs = tuple(_load_toml(path) for path in files)
    return build_inventory_vocabulary(configs)
