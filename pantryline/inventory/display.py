"""Display helpers for parsed items on catalog and cart pages."""

from __future__ import annotations

import math

from pantryline.domain.item import ItemRecord


def get_display_unit(item: ItemRecord) -> str:
    """
    Return the most user-friendly unit to show on a product card.

    - "Litre" for oils or items stocked in litres
    - "Pack" for items sold in multi-unit packs
    - otherwise the item's own unit (KG, PCS, ...)
    """
    if "oil" in item.description.lower() or item.units.upper() == "LITRE":
        return "Litre"
    if item.packing > 1:
        return "Pack"
    return item.units


def _format_number(value: float) -> str:
    return f"{value:.0f}" if float(value).is_integer() else f"{value:.2f}"


def format_quantity(quantity: float | int | str | None, units: str | None) -> str:
    """Format an order quantity, showing sub-kilogram weights in grams."""
    units = units or ""
    try:
        number = float(quantity)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return f"0 {units}"
    if not math.isfinite(number) or number <= 0:
        return f"0 {units}"

    if units.strip().lower() == "kg":
        grams = number * 1000
        if grams < 1000:
            # Half grams round up.
            return f"{math.floor(grams + 0.5)}g"
        return f"{_format_number(number)}kg"

    return f"{_format_number(number)} {units}"
