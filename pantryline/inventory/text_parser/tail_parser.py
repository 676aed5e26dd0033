"""Carve the fixed trailing fields off an inventory line."""

from __future__ import annotations

from dataclasses import dataclass

from .common import MIN_LINE_TOKENS, _parse_non_negative_int, _parse_non_negative_number, _tokenize

REASON_TOO_FEW_TOKENS = "too_few_tokens"
REASON_INVALID_PACKING = "invalid_packing"
REASON_INVALID_SHELF_LIFE = "invalid_shelf_life"


@dataclass(frozen=True)
class LineTail:
    """Code, fixed tail fields and the untouched middle tokens of one line."""

    code: str
    units: str
    packing: float
    shelf_life_days: int
    # Tokens between the code and the units, left for the field extractor.
    middle: tuple[str, ...]


@dataclass(frozen=True)
class TailRejection:
    reason: str


def split_line_tail(line: str) -> LineTail | TailRejection:
    """
    Split ``CODE ... UNITS PACKING SHELF_LIFE_DAYS`` into its fixed parts.

    Returns a TailRejection when the line has fewer than five tokens or either
    trailing number is not a non-negative value. Nothing is salvaged from a
    rejected line.
    """
    tokens = _tokenize(line)
    if len(tokens) < MIN_LINE_TOKENS:
        return TailRejection(REASON_TOO_FEW_TOKENS)

    shelf_life_days = _parse_non_negative_int(tokens[-1])
    if shelf_life_days is None:
        return TailRejection(REASON_INVALID_SHELF_LIFE)

    packing = _parse_non_negative_number(tokens[-2])
    if packing is None:
        return TailRejection(REASON_INVALID_PACKING)

    return LineTail(
        code=tokens[0],
        units=tokens[-3],
        packing=packing,
        shelf_life_days=shelf_life_days,
        middle=tuple(tokens[1:-3]),
    )
