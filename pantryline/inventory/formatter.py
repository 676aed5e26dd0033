"""Format parsed inventory items for terminal output."""

from __future__ import annotations

import json

from pantryline.domain.item import ItemRecord, SkippedLine

TABLE_COLUMNS = ("CODE", "REMARK", "TYPE", "CATEGORY", "DESCRIPTION", "UNITS", "PACKING", "SHELF", "HINT")


def _format_packing(packing: float) -> str:
    return f"{packing:g}"


def _item_row(item: ItemRecord) -> tuple[str, ...]:
    return (
        item.code,
        item.remark or "-",
        item.item_type,
        item.category,
        item.description,
        item.units,
        _format_packing(item.packing),
        str(item.shelf_life_days),
        item.display_hint,
    )


def format_items_json(items: list[ItemRecord], indent: int | None = 2) -> str:
    """Render items as a JSON array of camelCase records."""
    return json.dumps([item.to_dict() for item in items], indent=indent, ensure_ascii=False)


def format_items_table(items: list[ItemRecord], indent: str = "") -> list[str]:
    """
    Format items as aligned text columns.

    Args:
        items: Parsed records, in display order
        indent: Prefix for each output line

    Returns:
        Header line followed by one line per item; empty list for no items
    """
    if not items:
        return []

    rows = [TABLE_COLUMNS, *(_item_row(item) for item in items)]
    widths = [max(len(row[col]) for row in rows) for col in range(len(TABLE_COLUMNS))]

    lines = []
    for row in rows:
        cells = [cell.ljust(width) for cell, width in zip(row, widths)]
        lines.append(f"{indent}{'  '.join(cells)}".rstrip())
    return lines


def format_skipped_lines(skipped: list[SkippedLine]) -> list[str]:
    """Describe skipped input lines, one per output line."""
    return [f"line {entry.line_number}: {entry.reason}: {entry.text}" for entry in skipped]
