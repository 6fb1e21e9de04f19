import math

import pytest

from calculadora.core.formatting import (
    format_display,
    format_number,
    format_preview,
    parse_float,
    to_exponential,
)


@pytest.mark.parametrize("value, expected", [
    (3.0, "3"),
    (-7.0, "-7"),
    (-0.0, "0"),
    (0.5, "0.5"),
    (2.5, "2.5"),
    (0.000001, "0.000001"),
    (1e-7, "1e-7"),
    (1e20, "100000000000000000000"),
    (1e21, "1e+21"),
    (float("inf"), "Infinity"),
    (float("-inf"), "-Infinity"),
    (float("nan"), "NaN"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_to_exponential():
    assert to_exponential(123456789.123) == "1.234568e+8"
    assert to_exponential(0.000000000123) == "1.230000e-10"
    assert to_exponential(-1234567890123) == "-1.234568e+12"
    assert to_exponential(5, digits=2) == "5.00e+0"


def test_to_exponential_ties_round_away_from_zero():
    assert to_exponential(1234568.5) == "1.234569e+6"
    assert to_exponential(-1234568.5) == "-1.234569e+6"
    assert to_exponential(2.5, digits=0) == "3e+0"
    assert to_exponential(9.5, digits=0) == "1e+1"
    assert format_display("1234568.50000") == "1.234569e+6"


@pytest.mark.parametrize("text, expected", [
    ("42", 42.0),
    ("0.", 0.0),
    ("-7", -7.0),
    ("1e-8.", 1e-8),
    ("1e-8.5", 1e-8),
    ("1e", 1.0),
    ("Infinity5", math.inf),
    ("-Infinity", -math.inf),
    (".5", 0.5),
])
def test_parse_float_reads_leading_number(text, expected):
    assert parse_float(text) == expected


def test_parse_float_without_number_is_nan():
    assert math.isnan(parse_float("NaN"))
    assert math.isnan(parse_float("NaN5"))
    assert math.isnan(parse_float(""))


def test_format_display_switches_after_twelve_chars():
    assert format_display("123456789012") == "123456789012"
    assert format_display("1234567890123") == "1.234568e+12"
    assert format_display("0.30000000000000004") == "3.000000e-1"
    assert format_display("12345", max_length=4) == "1.234500e+4"


def test_format_preview():
    assert format_preview("12", "+") == "12 +"
    assert format_preview(None, "+") == ""
    assert format_preview("12", None) == ""
