"""Tests for the individual inventory text parser stages."""

from __future__ import annotations

import pytest
from pantryline.inventory.text_parser import (
    ExtractedFields,
    LineTail,
    TailRejection,
    derive_display_hint,
    extract_fields,
    split_inventory_lines,
    split_line_tail,
)
from pantryline.inventory.text_parser.common import _looks_like_category_token, _title_case
from pantryline.inventory.vocabulary import get_default_vocabulary


def test_split_inventory_lines_trims_and_numbers() -> None:
    raw = "  101 Baby Corn KG 1 180  \r\n\r\n102 Sweet Corn KG 1 90\n"

    assert split_inventory_lines(raw) == [
        (1, "101 Baby Corn KG 1 180"),
        (3, "102 Sweet Corn KG 1 90"),
    ]


def test_split_inventory_lines_only_checks_first_line_for_header() -> None:
    raw = "101 Baby Corn KG 1 180\ncode x y z 1 1"

    assert [text for _, text in split_inventory_lines(raw)] == ["101 Baby Corn KG 1 180", "code x y z 1 1"]


def test_split_inventory_lines_header_must_be_whole_token() -> None:
    raw = "CODES are listed below KG 1 1"

    assert split_inventory_lines(raw) == [(1, raw)]


def test_split_line_tail_carves_fixed_fields() -> None:
    tail = split_line_tail("999 NEW DRY SPICE Sample Spice kg 2.5 180")

    assert tail == LineTail(
        code="999",
        units="kg",
        packing=2.5,
        shelf_life_days=180,
        middle=("NEW", "DRY", "SPICE", "Sample", "Spice"),
    )


@pytest.mark.parametrize("packing", ["0", "12", "1.5", ".5", "2."])
def test_split_line_tail_accepts_plain_non_negative_packing(packing: str) -> None:
    tail = split_line_tail(f"101 Baby Corn KG {packing} 180")

    assert isinstance(tail, LineTail)
    assert tail.packing == float(packing)


@pytest.mark.parametrize("packing", ["-1", "+1", "inf", "1,5", "1e2", "one"])
def test_split_line_tail_rejects_other_packing(packing: str) -> None:
    assert split_line_tail(f"101 Baby Corn KG {packing} 180") == TailRejection("invalid_packing")


def test_split_line_tail_requires_five_tokens() -> None:
    assert split_line_tail("101 Corn KG 1") == TailRejection("too_few_tokens")
    assert isinstance(split_line_tail("101 Corn KG 1 7"), LineTail)


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("SPICE", True),
        ("Apple", True),
        ("BBQ", True),
        ("apple", False),
        ("McCain", False),
        ("Extralongword", False),
        ("ABCDEFGHIJKL", False),
        ("ABCDEFGHIJK", True),
        ("&", False),
    ],
)
def test_category_token_shape(token: str, expected: bool) -> None:
    assert _looks_like_category_token(token) is expected


def test_title_case_lowers_word_tails() -> None:
    assert _title_case("SAMPLE spice") == "Sample Spice"
    assert _title_case("FRUITS & VEG") == "Fruits & Veg"
    assert _title_case("o'NEILL") == "O'neill"


def test_extract_fields_does_not_mutate_input() -> None:
    middle = ("NEW", "DRY", "SPICE", "Sample", "Spice")

    fields = extract_fields(middle, get_default_vocabulary())

    assert middle == ("NEW", "DRY", "SPICE", "Sample", "Spice")
    assert fields == ExtractedFields(remark="NEW", item_type="DRY", category="SPICE", description="Sample Spice")


def test_extract_fields_remark_only_checks_first_token() -> None:
    fields = extract_fields(("Corn", "NEW"), get_default_vocabulary())

    assert fields.remark is None
    assert fields.description == "Corn NEW"


def test_extract_fields_item_type_must_follow_remark_directly() -> None:
    fields = extract_fields(("NEW", "Baby", "MEAT"), get_default_vocabulary())

    assert fields.item_type == "Unknown"
    assert fields.category == "Unknown"
    assert fields.description == "Baby MEAT"


def test_extract_fields_partial_multi_word_phrase_is_not_an_item_type() -> None:
    fields = extract_fields(("FRUITS", "&", "Berries"), get_default_vocabulary())

    assert fields.item_type == "Unknown"
    assert fields.description == "FRUITS & Berries"


def test_extract_fields_dry_rule_skipped_when_shape_rule_consumed() -> None:
    fields = extract_fields(("DRY", "Spice", "cumin", "seeds"), get_default_vocabulary())

    assert fields.category == "Spice"
    assert fields.description == "cumin seeds"


def test_extract_fields_empty_middle() -> None:
    fields = extract_fields((), get_default_vocabulary())

    assert fields == ExtractedFields(remark=None, item_type="Unknown", category="Unknown", description="N/A")


def test_extract_fields_catering_remark_without_tokens() -> None:
    fields = extract_fields(("CATER",), get_default_vocabulary())

    assert fields == ExtractedFields(remark="CATER", item_type="CATER", category="Unknown", description="N/A")


@pytest.mark.parametrize(
    ("description", "category", "expected"),
    [
        ("Chicken Fried Rice", "Unknown", "chicken"),
        ("Beef Tomato Stew", "Unknown", "beef"),
        ("Pineapple Chunks", "Unknown", "apple"),
        ("Cheddar Cheese Block", "Dairy", "cheese"),
        ("Sample Spice", "Spice", "spice"),
        ("Sample Spice", "Whole Spices", "whole"),
    ],
)
def test_derive_display_hint(description: str, category: str, expected: str) -> None:
    keywords = get_default_vocabulary().display_hint_keywords

    assert derive_display_hint(description, category, keywords) == expected
