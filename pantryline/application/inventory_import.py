"""Inventory file import workflow.

Reads a raw inventory text export, parses it and hands back the records
for a caller (CLI, admin import, catalog seeding) to display or persist.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from pantryline.domain.item import ItemRecord, SkippedLine
from pantryline.inventory import parse_inventory_text
from pantryline.runtime import get_logger, load_inventory_vocabulary

logger = get_logger(__name__)

ImportStatus = Literal["ok", "file_not_found", "unreadable", "no_items"]


@dataclass(frozen=True)
class InventoryImportRequest:
    """Typed inputs for one inventory import run."""

    inventory_file: str
    # None means the project-level vocabulary config.
    vocabulary_paths: tuple[str, ...] | None = None
    encoding: str = "utf-8-sig"


@dataclass(frozen=True)
class InventoryImportResult:
    """Outcome of an inventory import run."""

    status: ImportStatus
    items: list[ItemRecord] = field(default_factory=list)
    skipped: list[SkippedLine] = field(default_factory=list)
    error: str | None = None


def run_inventory_import(request: InventoryImportRequest) -> InventoryImportResult:
    """Read and parse an inventory text file."""
    path = Path(request.inventory_file).expanduser()
    if not path.is_file():
        return InventoryImportResult(status="file_not_found", error=f"File not found: {path}")

    try:
        raw_text = path.read_text(encoding=request.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read inventory file %s: %s", path, exc)
        return InventoryImportResult(status="unreadable", error=f"Could not read {path}: {exc}")

    vocabulary = load_inventory_vocabulary(request.vocabulary_paths)

    skipped: list[SkippedLine] = []
    items = parse_inventory_text(raw_text, vocabulary=vocabulary, skipped_sink=skipped)
    logger.info("Parsed %d items from %s (%d lines skipped)", len(items), path, len(skipped))

    if not items:
        return InventoryImportResult(
            status="no_items",
            skipped=skipped,
            error="Could not parse any items from the file. Please check the format.",
        )
    return InventoryImportResult(status="ok", items=items, skipped=skipped)
