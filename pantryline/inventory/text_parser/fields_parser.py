"""Heuristic extraction of remark, item type and category from a line head."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from pantryline.domain.item import NO_DESCRIPTION, UNKNOWN

from ..vocabulary import InventoryVocabulary
from .common import _looks_like_category_token


@dataclass(frozen=True)
class ExtractedFields:
    """Raw (not yet title-cased) head fields of one inventory line."""

    remark: str | None
    item_type: str
    category: str
    description: str


def _take_remark(tokens: list[str], vocabulary: InventoryVocabulary) -> str | None:
    if tokens and vocabulary.is_remark(tokens[0]):
        return tokens.pop(0).upper()
    return None


def _take_item_type(tokens: list[str], vocabulary: InventoryVocabulary) -> str | None:
    """Consume a known item type, trying multi-word phrases longest first."""
    for phrase in vocabulary.multi_word_item_types:
        size = len(phrase)
        if len(tokens) >= size and tuple(t.upper() for t in tokens[:size]) == phrase:
            del tokens[:size]
            return " ".join(phrase)

    if tokens and vocabulary.is_item_type(tokens[0]):
        return tokens.pop(0).upper()
    return None


def _take_category(tokens: list[str], item_type: str, vocabulary: InventoryVocabulary) -> str | None:
    """
    Consume a category token that follows an explicit item type.

    The shape rule runs first; the dry-goods rule only fires when the shape
    rule left the head token in place.
    """
    if not tokens:
        return None
    if _looks_like_category_token(tokens[0]):
        return tokens.pop(0)
    if item_type == vocabulary.dry_goods_item_type:
        # Dry goods always carry a sub-category, whatever its shape.
        return tokens.pop(0)
    return None


def extract_fields(middle: Sequence[str], vocabulary: InventoryVocabulary) -> ExtractedFields:
    """
    Resolve the optional head fields from the tokens between code and units.

    Steps run in a fixed order over a private copy of ``middle``, each one
    consuming tokens from the front:

    1. remark from the remark vocabulary
    2. item type (multi-word phrases, then single words); a catering remark
       stands in for a missing item type
    3. category, only after an explicit item type
    4. category falls back to the first word of a known item type
    5. whatever is left becomes the description

    Never fails; unresolved fields keep their sentinels.
    """
    tokens = list(middle)

    remark = _take_remark(tokens, vocabulary)

    matched_item_type = _take_item_type(tokens, vocabulary)
    if matched_item_type is not None:
        item_type = matched_item_type
    elif remark is not None and remark == vocabulary.catering_remark:
        item_type = vocabulary.catering_remark
    else:
        item_type = UNKNOWN

    category = UNKNOWN
    if matched_item_type is not None:
        category = _take_category(tokens, matched_item_type, vocabulary) or UNKNOWN

    if category == UNKNOWN and item_type not in (UNKNOWN, vocabulary.catering_remark):
        category = item_type.split()[0]

    description = " ".join(tokens) or NO_DESCRIPTION

    return ExtractedFields(
        remark=remark,
        item_type=item_type,
        category=category,
        description=description,
    )
