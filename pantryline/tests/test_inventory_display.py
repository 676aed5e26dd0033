"""Tests for catalog display helpers."""

import pytest
from pantryline.domain.item import ItemRecord
from pantryline.inventory.display import format_quantity, get_display_unit


def _item(description: str, units: str = "KG", packing: float = 1) -> ItemRecord:
    return ItemRecord(
        code="1",
        remark=None,
        item_type="Unknown",
        category="Unknown",
        description=description,
        units=units,
        packing=packing,
        shelf_life_days=1,
        display_hint="unknown",
    )


def test_oils_display_in_litres() -> None:
    assert get_display_unit(_item("Sunflower Oil", units="CAN", packing=4)) == "Litre"
    assert get_display_unit(_item("Soy Sauce", units="litre")) == "Litre"


def test_multi_unit_packs_display_as_pack() -> None:
    assert get_display_unit(_item("Cola Zero Can", units="PCS", packing=24)) == "Pack"


def test_single_items_keep_their_units() -> None:
    assert get_display_unit(_item("Baby Corn", units="KG", packing=1)) == "KG"
    assert get_display_unit(_item("Egg Tray", units="PCS", packing=0.5)) == "PCS"


@pytest.mark.parametrize(
    ("quantity", "units", "expected"),
    [
        (0.5, "kg", "500g"),
        (0.25, "KG", "250g"),
        (0.0125, "kg", "13g"),
        (2, "kg", "2kg"),
        (1.5, "KG", "1.50kg"),
        (3, "PCS", "3 PCS"),
        (2.5, "PCS", "2.50 PCS"),
        ("4", "PCS", "4 PCS"),
        (0, "PCS", "0 PCS"),
        (-1, "kg", "0 kg"),
        ("abc", "kg", "0 kg"),
        (None, None, "0 "),
    ],
)
def test_format_quantity(quantity: object, units: str | None, expected: str) -> None:
    assert format_quantity(quantity, units) == expected  # type: ignore[arg-type]
