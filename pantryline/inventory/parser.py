"""Parse inventory text blocks into item records."""

from __future__ import annotations

import logging

from pantryline.domain.item import ItemRecord, SkippedLine

from .text_parser import (
    TailRejection,
    build_item_record,
    extract_fields,
    split_inventory_lines,
    split_line_tail,
)
from .vocabulary import InventoryVocabulary, get_default_vocabulary

# Pure module: plain stdlib logger, handlers are installed by pantryline.runtime.
logger = logging.getLogger(__name__)


def parse_inventory_line(line: str, vocabulary: InventoryVocabulary | None = None) -> ItemRecord | TailRejection:
    """Parse a single trimmed, non-header line."""
    vocab = vocabulary or get_default_vocabulary()
    tail = split_line_tail(line)
    if isinstance(tail, TailRejection):
        return tail
    fields = extract_fields(tail.middle, vocab)
    return build_item_record(tail, fields, vocab)


def parse_inventory_text(
    raw_text: str,
    *,
    vocabulary: InventoryVocabulary | None = None,
    skipped_sink: list[SkippedLine] | None = None,
) -> list[ItemRecord]:
    """
    Convert an inventory text block into item records, one per accepted line.

    Each line is expected to look like::

        CODE [REMARK] [ITEM_TYPE...] [CATEGORY] DESCRIPTION... UNITS PACKING SHELF_LIFE_DAYS

    An optional ``CODE ...`` header on the first line is dropped. Malformed
    lines are skipped rather than raised; pass ``skipped_sink`` to collect
    them. Records come back in input order.

    Args:
        raw_text: Whole inventory text, newline separated
        vocabulary: Lookup tables; built-in defaults when omitted
        skipped_sink: Optional list that receives a SkippedLine per dropped line

    Returns:
        Parsed records, in the order their lines appear in ``raw_text``
    """
    if not isinstance(raw_text, str):
        raise TypeError(f"raw_text must be str, not {type(raw_text).__name__}")

    vocab = vocabulary or get_default_vocabulary()
    items: list[ItemRecord] = []
    skipped = 0

    for line_number, line in split_inventory_lines(raw_text):
        result = parse_inventory_line(line, vocab)
        if isinstance(result, TailRejection):
            skipped += 1
            logger.debug("Skipping line %d (%s): %s", line_number, result.reason, line)
            if skipped_sink is not None:
                skipped_sink.append(SkippedLine(line_number=line_number, reason=result.reason, text=line))
            continue
        items.append(result)

    if skipped:
        logger.info("Parsed %d inventory items, skipped %d malformed lines", len(items), skipped)
    return items
