"""Shared constants and helpers for inventory text parsing."""

import math
import re

# CODE + UNITS + PACKING + SHELF_LIFE + at least one description token
MIN_LINE_TOKENS = 5

# Category tokens are short codes or single capitalized words.
CATEGORY_MAX_LENGTH = 12
CAPITALIZED_WORD = re.compile(r"^[A-Z][a-z]+$")

HEADER_FIRST_TOKEN = "CODE"

# Shelf life beyond nine digits (about 2.7 million years) is never real data.
SHELF_LIFE_MAX_DIGITS = 9

# Plain non-negative decimals only: no sign, exponent, nan or inf.
_NON_NEGATIVE_NUMBER = re.compile(r"^(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)$")
_NON_NEGATIVE_INTEGER = re.compile(r"^[0-9]+$")


def _tokenize(line: str) -> list[str]:
    """Split a line on runs of whitespace."""
    return line.split()


def _parse_non_negative_number(token: str) -> float | None:
    """Parse a packing multiplier such as ``12``, ``1.5`` or ``.5``."""
    if not _NON_NEGATIVE_NUMBER.match(token):
        return None
    value = float(token)
    # Very long digit runs overflow to inf.
    return value if math.isfinite(value) else None


def _parse_non_negative_int(token: str) -> int | None:
    """Parse a shelf life in days; only bare digits are accepted."""
    if len(token) > SHELF_LIFE_MAX_DIGITS or not _NON_NEGATIVE_INTEGER.match(token):
        return None
    return int(token)


def _looks_like_category_token(token: str) -> bool:
    """Return True for short ALL-CAPS codes or single ``Capitalized`` words."""
    if len(token) >= CATEGORY_MAX_LENGTH:
        return False
    return token.isupper() or CAPITALIZED_WORD.match(token) is not None


def _title_case(text: str) -> str:
    """Capitalize the first letter of each space-separated word, lower-case the rest."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" ") if word)
