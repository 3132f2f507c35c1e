"""Tests for text-field parsing and result formatting."""

from decimal import Decimal

import pytest

from tokencost.utils.numbers import (
    InvalidNumberError,
    format_input,
    format_jpy,
    format_tokens,
    format_usd,
    parse_numeric_input,
    round_half_up,
)


@pytest.mark.parametrize("text", ["", None])
def test_empty_is_unset(text):
    assert parse_numeric_input(text) is None


@pytest.mark.parametrize("text", [" ", "   ", "\t"])
def test_whitespace_only_is_zero(text):
    assert parse_numeric_input(text) == 0


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2000", Decimal(2000)),
        (" 12 ", Decimal(12)),
        ("0.7", Decimal("0.7")),
        (".5", Decimal("0.5")),
        ("1e3", Decimal(1000)),
        ("-5", Decimal(-5)),
        ("1e308", Decimal("1e308")),
    ],
)
def test_numbers_parse(text, expected):
    assert parse_numeric_input(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "abc",
        "12abc",
        "1,000",
        "1_000",
        "nan",
        "Infinity",
        "1e309",
        "1e999999",
        "-1e999999",
        "1e9999999",
    ],
)
def test_junk_is_rejected(text):
    with pytest.raises(InvalidNumberError):
        parse_numeric_input(text)


def test_invalid_number_is_value_error():
    assert issubclass(InvalidNumberError, ValueError)


def test_format_input_round_trips_text():
    assert format_input(None) == ""
    assert format_input(Decimal("0.70")) == "0.70"
    assert format_input(parse_numeric_input(" 1000 ")) == "1000"


def test_format_usd_two_decimals():
    assert format_usd(Decimal("199.95000")) == "$199.95"
    assert format_usd(Decimal("0.005")) == "$0.01"
    assert format_usd(Decimal(0)) == "$0.00"


def test_format_jpy_rounds_and_groups():
    assert format_jpy(Decimal("29992.5")) == "¥29,993"
    assert format_jpy(Decimal("29992.49")) == "¥29,992"
    assert format_jpy(Decimal("0.4")) == "¥0"


def test_format_tokens():
    assert format_tokens(Decimal(399_900_000)) == "399,900,000"
    assert format_tokens(Decimal("7003500.0")) == "7,003,500"
    assert format_tokens(Decimal("10.5")) == "10.5"
    assert format_tokens(Decimal("1234.56789")) == "1,234.568"


def test_format_input_has_no_exponent():
    assert format_input(parse_numeric_input("1e3")) == "1000"
    assert format_input(Decimal("2.5E+2")) == "250"


def test_round_half_up():
    assert round_half_up(Decimal("29992.5")) == 29993
    assert round_half_up(Decimal("0.49")) == 0


def test_huge_values_switch_to_exponent_notation():
    assert format_tokens(Decimal("3.99900E+25")) == "3.999E+25"
    assert format_usd(Decimal("1.9995E+999998")) == "$1.9995E+999998"
    assert format_jpy(Decimal("6E+22")) == "¥6E+22"


def test_values_just_below_exponent_notation_keep_digits():
    text = format_tokens(Decimal("999999999999999999999.5"))
    assert text == "999,999,999,999,999,999,999.5"
    assert format_usd(Decimal("123456789012345678901")) == "$123456789012345678901.00"
    assert format_jpy(Decimal("1E+20")) == "¥100,000,000,000,000,000,000"
