"""Inventory command handlers used by the unified CLI."""

import argparse

from pantryline.application.inventory_import import InventoryImportRequest, run_inventory_import
from pantryline.inventory.formatter import format_items_json, format_items_table, format_skipped_lines
from pantryline.runtime import get_logger, load_inventory_vocabulary

logger = get_logger(__name__)


def _vocabulary_paths(args: argparse.Namespace) -> tuple[str, ...] | None:
    paths = getattr(args, "vocabulary", None)
    return tuple(paths) if paths else None


def cmd_parse(args: argparse.Namespace) -> int:
    """Parse an inventory text file and print the records."""
    result = run_inventory_import(
        InventoryImportRequest(
            inventory_file=args.file,
            vocabulary_paths=_vocabulary_paths(args),
        )
    )

    if result.status in ("file_not_found", "unreadable"):
        logger.error("%s", result.error)
        print(f"Error: {result.error}")
        return 1

    if args.show_skipped and result.skipped:
        print(f"Skipped {len(result.skipped)} line(s):")
        for line in format_skipped_lines(result.skipped):
            print(f"  {line}")

    if result.status == "no_items":
        print(result.error)
        return 1

    if args.format == "json":
        print(format_items_json(result.items))
    else:
        for line in format_items_table(result.items):
            print(line)
        print(f"\n{len(result.items)} item(s), {len(result.skipped)} line(s) skipped")
    return 0


def cmd_vocabulary(args: argparse.Namespace) -> int:
    """Print the effective parsing vocabulary."""
    vocabulary = load_inventory_vocabulary(_vocabulary_paths(args))

    print("Remarks:", ", ".join(sorted(vocabulary.remarks)))
    print("Item types:", ", ".join(sorted(vocabulary.item_types)))
    print("Multi-word item types:", ", ".join(" ".join(p) for p in vocabulary.multi_word_item_types) or "-")
    print("Catering remark:", vocabulary.catering_remark)
    print("Dry goods item type:", vocabulary.dry_goods_item_type)
    print("Display hint keywords:", ", ".join(vocabulary.display_hint_keywords))
    return 0
