"""Core domain models for pantryline.

This module provides the data models shared by the parser and its callers:
- ItemRecord: one parsed supply item
- SkippedLine: an input line dropped as malformed

Usage:
    from pantryline.domain import ItemRecord, SkippedLine
"""

from pantryline.domain.item import NO_DESCRIPTION, UNKNOWN, ItemRecord, SkippedLine

__all__ = [
    "ItemRecord",
    "SkippedLine",
    "NO_DESCRIPTION",
    "UNKNOWN",
]
