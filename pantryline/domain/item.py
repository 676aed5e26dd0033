"""Data models for parsed inventory items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

UNKNOWN = "Unknown"
NO_DESCRIPTION = "N/A"


def _json_number(value: float) -> float | int:
    """Whole numbers serialize without a trailing ``.0``."""
    return int(value) if float(value).is_integer() else value


@dataclass(frozen=True)
class ItemRecord:
    """A single supply item parsed from one inventory line."""

    code: str
    remark: str | None
    item_type: str
    category: str
    description: str
    units: str
    packing: float
    shelf_life_days: int
    display_hint: str

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase mapping read by catalog, cart and import consumers."""
        return {
            "code": self.code,
            "remark": self.remark,
            "itemType": self.item_type,
            "category": self.category,
            "description": self.description,
            "units": self.units,
            "packing": _json_number(self.packing),
            "shelfLifeDays": self.shelf_life_days,
            "displayHint": self.display_hint,
        }


@dataclass(frozen=True)
class SkippedLine:
    """An input line the parser dropped as malformed."""

    # 1-based, counted over the raw text including blank lines.
    line_number: int
    reason: str
    text: str
