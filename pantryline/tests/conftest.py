"""Shared pytest fixtures for pantryline tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from pantryline.runtime import load_inventory_vocabulary, reset_paths


@pytest.fixture(autouse=True)
def isolated_project_root(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Point project paths at an empty root so local config never leaks into tests."""
    root = tmp_path_factory.mktemp("project_root")
    monkeypatch.setenv("PANTRYLINE_ROOT", str(root))
    reset_paths()
    load_inventory_vocabulary.cache_clear()
    yield root
    reset_paths()
    load_inventory_vocabulary.cache_clear()
