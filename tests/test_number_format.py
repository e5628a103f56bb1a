import math

import pytest

from assetcodec.mapfile import MapFormat, format_int, format_number


@pytest.mark.parametrize(
    "value,expected",
    [
        (12.0, "12"),
        (1.23456789012345, "1.2345678901"),
        (0.5, "0.5"),
        (-64.0, "-64"),
        (1e-11, "0"),
        (-1e-12, "0"),
        (-0.0, "0"),
        (1e20, "100000000000000000000"),
        (0.00001, "0.00001"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_number_rounds_half_away_from_zero():
    # 0.125 and 2.5 are exact in binary, so no representation noise.
    assert format_number(0.125, digits=2) == "0.13"
    assert format_number(-0.125, digits=2) == "-0.13"
    assert format_int(2.5) == "3"
    assert format_int(-2.5) == "-3"


def test_patch_precision_trims_to_five_digits():
    assert format_number(1.23456789, digits=5) == "1.23457"
    assert format_number(3.000004, digits=5) == "3"


def test_never_exponent_notation():
    for v in (1e-7, 1.5e-9, 1e15, 1.7976931348623157e308, 5e-324):
        text = format_number(v)
        assert "e" not in text.lower()


def test_largest_double_formats_as_integer_digits():
    text = format_number(1.7976931348623157e308)
    assert text.isdigit()
    assert len(text) == 309


def test_custom_separator():
    assert format_number(1.5, separator=",") == "1,5"


@pytest.mark.parametrize("bad", [math.inf, -math.inf, math.nan])
def test_non_finite_rejected(bad):
    with pytest.raises(ValueError):
        format_number(bad)


def test_map_format_defaults():
    cfg = MapFormat()
    assert cfg.decimal_separator == "."
    assert cfg.max_fraction_digits == 10
    assert cfg.patch_fraction_digits == 5
    assert cfg.line_terminator == "\r\n"
