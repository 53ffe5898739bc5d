"""Tests for nutrient table extraction."""

import json

from nutrient_resolver.services.extraction import (
    extract_table,
    parse_balanced_lines,
    parse_fence_stripped,
    parse_greedy,
)
from tests.conftest import profile_payload, table_json, table_payload


def test_extract_clean_json() -> None:
    text = table_json(grams=profile_payload(calories=130, protein=2.7))

    table = extract_table(text)

    assert table is not None
    assert table.per_100_grams.calories == 130
    assert table.per_100_grams.protein == 2.7
    assert table.per_pack.calories == 0


def test_extract_ignores_surrounding_prose() -> None:
    text = (
        "Sure! Here is the nutrient data you asked for:\n"
        + table_json(pieces=profile_payload(calories=40))
        + "\nLet me know if you need anything else."
    )

    table = extract_table(text)

    assert table is not None
    assert table.per_piece.calories == 40


def test_fence_with_braced_info_string_needs_stripping() -> None:
    text = "```json {nutrients}\n" + table_json() + "\n```"

    assert parse_greedy(text) is None
    assert parse_fence_stripped(text) is not None
    assert extract_table(text) is not None


def test_trailing_braces_fall_back_to_balanced_scan() -> None:
    text = table_json(ml=profile_payload(calories=61)) + (
        "\nNote: values are per {serving basis} as requested."
    )

    assert parse_greedy(text) is None
    assert parse_fence_stripped(text) is None
    payload = parse_balanced_lines(text)
    assert payload is not None

    table = extract_table(text)
    assert table is not None
    assert table.per_100_milliliters.calories == 61


def test_balanced_scan_starts_at_first_brace_line() -> None:
    text = "Intro line\n" + json.dumps({"a": {"b": 1}}, indent=2) + "\ntrailing }"

    assert parse_balanced_lines(text) == {"a": {"b": 1}}


def test_missing_field_rejects_whole_table() -> None:
    payload = table_payload()
    del payload["pack"]["iron"]

    assert extract_table(json.dumps(payload)) is None


def test_missing_basis_rejects_table() -> None:
    payload = table_payload()
    del payload["ml"]

    assert extract_table(json.dumps(payload)) is None


def test_non_numeric_values_are_rejected() -> None:
    as_text = table_payload(grams=profile_payload())
    as_text["grams"]["calories"] = "130 kcal"
    as_bool = table_payload()
    as_bool["pieces"]["fiber"] = True

    assert extract_table(json.dumps(as_text)) is None
    assert extract_table(json.dumps(as_bool)) is None


def test_negative_and_non_finite_values_are_rejected() -> None:
    negative = table_payload(grams=profile_payload(fat=-1))
    not_a_number = table_json().replace('"sugar": 0', '"sugar": NaN', 1)

    assert extract_table(json.dumps(negative)) is None
    assert extract_table(not_a_number) is None


def test_text_without_object_is_invalid() -> None:
    assert extract_table("I could not find nutrition data for that food.") is None
    assert extract_table("[1, 2, 3]") is None
    assert extract_table("{not json at all}") is None


def test_deeply_nested_output_is_invalid() -> None:
    text = '{"grams": ' + "[" * 5000 + "]" * 5000 + "}"

    assert extract_table(text) is None
