"""Final formatting of parsed fields into an ItemRecord."""

from __future__ import annotations

from collections.abc import Sequence

from pantryline.domain.item import NO_DESCRIPTION, UNKNOWN, ItemRecord

from ..vocabulary import InventoryVocabulary
from .common import _title_case
from .fields_parser import ExtractedFields
from .tail_parser import LineTail

_SENTINELS = {UNKNOWN, NO_DESCRIPTION}


def _format_free_text(value: str) -> str:
    if value in _SENTINELS:
        return value
    return _title_case(value)


def derive_display_hint(description: str, category: str, keywords: Sequence[str]) -> str:
    """Pick the placeholder illustration keyword for an item."""
    lowered = description.lower()
    for keyword in keywords:
        if keyword in lowered:
            return keyword
    words = category.split()
    return words[0].lower() if words else UNKNOWN.lower()


def build_item_record(tail: LineTail, fields: ExtractedFields, vocabulary: InventoryVocabulary) -> ItemRecord:
    item_type = _format_free_text(fields.item_type)
    category = _format_free_text(fields.category)
    description = _format_free_text(fields.description)

    return ItemRecord(
        code=tail.code,
        remark=fields.remark.upper() if fields.remark else None,
        item_type=item_type,
        category=category,
        description=description,
        units=tail.units.upper(),
        packing=tail.packing,
        shelf_life_days=tail.shelf_life_days,
        display_hint=derive_display_hint(description, category, vocabulary.display_hint_keywords),
    )
