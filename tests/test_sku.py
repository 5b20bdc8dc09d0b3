import pytest

from fields.normalization import number_to_text, to_text
from fields.sku import normalize_sku


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("B34ABC123V1", "ABC123"),
        ("b34abc123v1", "abc123"),
        ("  B34X  ", "X"),
        ("B34V1", ""),
        ("ABC123", "ABC123"),
        ("B34 ABC123 V1", "ABC123"),
        ("XB34", "XB34"),
        ("V1ABC", "V1ABC"),
        ("", ""),
        (None, ""),
        ("   ", ""),
    ],
)
def test_normalize_sku(raw, expected):
    assert normalize_sku(raw) == expected


@pytest.mark.parametrize("raw", ["B34ABC123V1", "  b34x ", "AAA001", "B34V1", "abc v1", ""])
def test_normalize_sku_is_idempotent(raw):
    once = normalize_sku(raw)
    assert normalize_sku(once) == once


def test_prefix_is_stripped_only_once():
    assert normalize_sku("B34B34X") == "B34X"


def test_numeric_sku_is_rendered_without_decimal_point():
    assert normalize_sku(12345.0) == "12345"
    assert normalize_sku(678) == "678"


def test_number_to_text_avoids_scientific_notation():
    assert number_to_text(1.68071e12) == "1680710000000"
    assert number_to_text(5901234123457) == "5901234123457"
    assert number_to_text(12.5) == "12.5"


def test_to_text_blanks():
    assert to_text(None) == ""
    assert to_text(float("nan")) == ""
    assert to_text("abc") == "abc"
