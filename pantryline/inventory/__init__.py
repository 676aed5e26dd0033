"""Inventory text parsing and item display helpers.

This package is pure: no file, network or database access. Callers own
reading the text and persisting the records.

Usage:
    from pantryline.inventory import parse_inventory_text

    records = parse_inventory_text(raw_text)
"""

from pantryline.inventory.display import format_quantity, get_display_unit
from pantryline.inventory.parser import parse_inventory_line, parse_inventory_text
from pantryline.inventory.vocabulary import (
    InventoryVocabulary,
    build_inventory_vocabulary,
    get_default_vocabulary,
)

__all__ = [
    "InventoryVocabulary",
    "build_inventory_vocabulary",
    "format_quantity",
    "get_default_vocabulary",
    "get_display_unit",
    "parse_inventory_line",
    "parse_inventory_text",
]
