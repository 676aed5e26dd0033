"""Lookup vocabularies for inventory line parsing.

The parser disambiguates the free-text head of a line (remark, item type,
category) only through these tables. Built-in vocabularies cover the
supplier's standard inventory export; project config files may extend them
(see ``pantryline.runtime.vocabulary_rules``).

To extend the built-ins:
1. Add upper-case codes to the remark or item type tuples below
2. Multi-word item types are matched as whole phrases, longest first
3. Display hint keywords are checked in order, first match wins
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

# Remark markers: newly listed, robot-fulfilled, catering-only.
DEFAULT_REMARKS: tuple[str, ...] = ("NEW", "ROBO", "CATER")

# A catering remark doubles as the item type when no item type token is present.
DEFAULT_CATERING_REMARK = "CATER"

DEFAULT_MULTI_WORD_ITEM_TYPES: tuple[str, ...] = ("FRUITS & VEG",)

# "DIARY" is the spelling used by the supplier export.
DEFAULT_ITEM_TYPES: tuple[str, ...] = ("MEAT", "SEAFOOD", "FROZEN", "DIARY", "DRY", "DRINKS")

# Dry goods lines always carry a sub-category after the item type.
DEFAULT_DRY_GOODS_ITEM_TYPE = "DRY"

# Priority order matters: "chicken" must win over "rice" in "Chicken Fried Rice".
DEFAULT_DISPLAY_HINT_KEYWORDS: tuple[str, ...] = (
    "apple",
    "banana",
    "chicken",
    "beef",
    "fish",
    "bread",
    "milk",
    "cheese",
    "tomato",
    "onion",
    "potato",
    "rice",
    "oil",
)


@dataclass(frozen=True)
class InventoryVocabulary:
    """Immutable lookup tables consulted by the field extractor."""

    remarks: frozenset[str]
    item_types: frozenset[str]
    # Sorted longest phrase first, each phrase pre-split into words.
    multi_word_item_types: tuple[tuple[str, ...], ...]
    display_hint_keywords: tuple[str, ...]
    catering_remark: str
    dry_goods_item_type: str

    def is_remark(self, token: str) -> bool:
        return token.upper() in self.remarks

    def is_item_type(self, token: str) -> bool:
        return token.upper() in self.item_types


def _normalize_words(raw: Any) -> tuple[str, ...]:
    """Normalize a TOML string-or-list value into a tuple of stripped strings."""
    if isinstance(raw, str):
        value = raw.strip()
        return (value,) if value else tuple()
    if isinstance(raw, list):
        return tuple(str(v).strip() for v in raw if str(v).strip())
    return tuple()


def _merge_unique(base: Iterable[str], extra: Iterable[str]) -> tuple[str, ...]:
    """Append ``extra`` to ``base`` keeping first-seen order and dropping repeats."""
    seen: set[str] = set()
    merged: list[str] = []
    for value in (*base, *extra):
        if value not in seen:
            seen.add(value)
            merged.append(value)
    return tuple(merged)


def _phrase_key(phrase: str) -> tuple[str, ...]:
    return tuple(phrase.upper().split())


def build_inventory_vocabulary(
    configs: Sequence[Mapping[str, Any]] | None = None,
) -> InventoryVocabulary:
    """Merge built-in vocabularies with in-memory ``[vocabulary]`` config tables.

    List keys extend the built-ins; scalar keys (``catering_remark``,
    ``dry_goods_item_type``) replace them, later configs winning.
    """
    remarks = DEFAULT_REMARKS
    item_types = DEFAULT_ITEM_TYPES
    multi_word = DEFAULT_MULTI_WORD_ITEM_TYPES
    hint_keywords = DEFAULT_DISPLAY_HINT_KEYWORDS
    catering_remark = DEFAULT_CATERING_REMARK
    dry_goods = DEFAULT_DRY_GOODS_ITEM_TYPE

    for config in configs or ():
        table = config.get("vocabulary", {})
        if not isinstance(table, Mapping):
            continue

        remarks = _merge_unique(remarks, (v.upper() for v in _normalize_words(table.get("remarks"))))
        item_types = _merge_unique(item_types, (v.upper() for v in _normalize_words(table.get("item_types"))))
        multi_word = _merge_unique(
            multi_word,
            (" ".join(_phrase_key(v)) for v in _normalize_words(table.get("multi_word_item_types"))),
        )
        hint_keywords = _merge_unique(
            hint_keywords,
            (v.lower() for v in _normalize_words(table.get("display_hint_keywords"))),
        )

        value = str(table.get("catering_remark") or "").strip()
        if value:
            catering_remark = value.upper()
            remarks = _merge_unique(remarks, (catering_remark,))
        value = str(table.get("dry_goods_item_type") or "").strip()
        if value:
            dry_goods = value.upper()

    # Single-word entries in the phrase list would never be reached before the
    # single-word table, so they are folded into it instead.
    phrases = [_phrase_key(p) for p in multi_word]
    item_types = _merge_unique(item_types, (words[0] for words in phrases if len(words) == 1))
    phrases = sorted((words for words in phrases if len(words) > 1), key=len, reverse=True)

    return InventoryVocabulary(
        remarks=frozenset(remarks),
        item_types=frozenset(item_types),
        multi_word_item_types=tuple(phrases),
        display_hint_keywords=hint_keywords,
        catering_remark=catering_remark,
        dry_goods_item_type=dry_goods,
    )


@lru_cache(maxsize=1)
def get_default_vocabulary() -> InventoryVocabulary:
    """Built-in-only vocabulary (no file I/O, no runtime deps)."""
    return build_inventory_vocabulary()
