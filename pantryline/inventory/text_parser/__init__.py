"""Composable inventory text parser stages."""

from .common import CATEGORY_MAX_LENGTH, MIN_LINE_TOKENS
from .fields_parser import ExtractedFields, extract_fields
from .lines import split_inventory_lines
from .normalizer import build_item_record, derive_display_hint
from .tail_parser import LineTail, TailRejection, split_line_tail

__all__ = [
    "CATEGORY_MAX_LENGTH",
    "MIN_LINE_TOKENS",
    "ExtractedFields",
    "LineTail",
    "TailRejection",
    "build_item_record",
    "derive_display_hint",
    "extract_fields",
    "split_inventory_lines",
    "split_line_tail",
]
