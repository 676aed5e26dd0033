"""Split raw inventory text into numbered candidate lines."""

from __future__ import annotations

import re

from .common import HEADER_FIRST_TOKEN, _tokenize

NumberedLine = tuple[int, str]

# Form feeds, \x85 and the Unicode separators stay inside a line as whitespace.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _is_header_line(line: str) -> bool:
    tokens = _tokenize(line)
    return bool(tokens) and tokens[0].upper() == HEADER_FIRST_TOKEN


def split_inventory_lines(raw_text: str) -> list[NumberedLine]:
    """
    Return trimmed, non-empty lines paired with their 1-based line numbers.

    Only the first non-empty line is checked for a ``CODE ...`` header. A
    header-looking line further down is kept and left for the tail tokenizer
    to reject.
    """
    numbered: list[NumberedLine] = []
    for line_number, line in enumerate(_LINE_BREAK.split(raw_text), start=1):
        stripped = line.strip()
        if stripped:
            numbered.append((line_number, stripped))

    if numbered and _is_header_line(numbered[0][1]):
        return numbered[1:]
    return numbered
